from typing import List, Dict, Any, Optional, Callable
import numpy as np
from ..ir.node import TensorNode
from ..ir.graph import broadcast_shapes
from ..ops.atomic_types import OpType
from ..ops.registry import get_composite_op, get_reference_factory


class ShapeInference:
    _handlers: Dict[str, Callable] = {}

    @classmethod
    def register_handler(cls, op_type: str):
        def decorator(func):
            cls._handlers[op_type] = func
            return func

        return decorator

    @staticmethod
    def infer(nodes: List[TensorNode], known_values: Optional[Dict[str, Any]] = None):
        """
        Updates the shapes of nodes in-place, in the given (topological) order.
        known_values maps input names to concrete arrays whose shapes win over
        the declared ones.
        """
        known_values = known_values or {}

        for node in nodes:
            if node.op_type in ShapeInference._handlers:
                ShapeInference._handlers[node.op_type](node, known_values)
            else:
                composite = get_composite_op(node.op_type)
                if composite is not None:
                    composite.infer_shape(node)
                else:
                    factory = get_reference_factory(node.op_type)
                    if factory is None:
                        raise NotImplementedError(
                            f"No shape handler or decomposition for '{node.op_type}'"
                        )
                    # Rebuild from the (already inferred) parents
                    node.shape = factory(node.parents, node.attrs).shape

            if node.shape is None or any(d is None for d in node.shape):
                raise ValueError(f"Cannot resolve shape for node {node}")


# ==============================================================================
# Op Handlers
# ==============================================================================


@ShapeInference.register_handler(OpType.INPUT)
def handle_input(node: TensorNode, known_values):
    val = known_values.get(node.name)
    if val is not None:
        node.shape = tuple(int(d) for d in np.shape(val))


@ShapeInference.register_handler(OpType.CONSTANT)
def handle_constant(node: TensorNode, known_values):
    val = node.get_attr("value")
    if val is not None:
        node.shape = tuple(int(d) for d in np.shape(val))
    elif node.shape is None:
        node.shape = ()


@ShapeInference.register_handler(OpType.MOD)
def handle_broadcast(node: TensorNode, known_values):
    shapes = [p.shape for p in node.parents if p.shape is not None]
    if len(shapes) != len(node.parents):
        return

    current_shape = shapes[0]
    for s in shapes[1:]:
        current_shape = broadcast_shapes(current_shape, s)
    node.shape = current_shape


@ShapeInference.register_handler(OpType.CAST)
def handle_unary(node: TensorNode, known_values):
    if node.parents and node.parents[0].shape is not None:
        node.shape = node.parents[0].shape


@ShapeInference.register_handler(OpType.GATHER)
def handle_gather(node: TensorNode, known_values):
    data, indices = node.parents
    if data.shape is None or indices.shape is None:
        return
    if len(data.shape) == 0:
        raise ValueError(f"Gather data must have rank >= 1, got {data.shape}")
    node.shape = tuple(indices.shape) + tuple(data.shape[1:])
