from .node import TensorNode
from .graph import topological_sort, get_inputs, get_constants, broadcast_shapes
from .dtypes import DType, TensorSignature, Backend

__all__ = [
    "TensorNode",
    "topological_sort",
    "get_inputs",
    "get_constants",
    "broadcast_shapes",
    "DType",
    "TensorSignature",
    "Backend",
]
