"""
File: layout_graphs/ops/registry.py
"""

from typing import Callable, Dict, Type, Optional
from .interface import CompositeOp

_REFERENCE_FACTORIES: Dict[str, Callable] = {}
_COMPOSITE_REGISTRY: Dict[str, Type[CompositeOp]] = {}


def register_reference_factory(op_type: str, factory: Callable):
    """Registers the function that builds the reference node for an atomic op."""
    _REFERENCE_FACTORIES[op_type] = factory


def get_reference_factory(op_type: str) -> Optional[Callable]:
    return _REFERENCE_FACTORIES.get(op_type, None)


def register_composite(cls):
    """Decorator to register a CompositeOp class."""
    if not issubclass(cls, CompositeOp):
        raise ValueError("Must inherit from CompositeOp")

    if not getattr(cls, "op_type", None):
        raise ValueError(f"{cls.__name__} must define 'op_type'")
    _COMPOSITE_REGISTRY[cls.op_type] = cls
    return cls


def get_composite_op(op_type: str) -> Optional[CompositeOp]:
    """Returns a fresh instance of the composite op handler."""
    cls = _COMPOSITE_REGISTRY.get(op_type, None)
    return cls() if cls else None


def list_composite_ops():
    return sorted(_COMPOSITE_REGISTRY.keys())
