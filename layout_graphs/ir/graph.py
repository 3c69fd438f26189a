from typing import Set, List, Optional, Tuple
from .node import TensorNode
from ..ops.atomic_types import OpType


def topological_sort(root: TensorNode) -> List[TensorNode]:
    """
    Returns a linear execution order for the graph ending at 'root'.
    """
    visited: Set[TensorNode] = set()
    order: List[TensorNode] = []

    def _visit(node: TensorNode):
        if node in visited:
            return
        visited.add(node)
        for parent in node.parents:
            _visit(parent)
        order.append(node)

    _visit(root)
    return order


def get_inputs(root: TensorNode) -> List[TensorNode]:
    """Returns all leaf nodes (OpType.INPUT) required for this graph."""
    topo = topological_sort(root)
    return [n for n in topo if n.op_type == OpType.INPUT]


def get_constants(root: TensorNode) -> List[TensorNode]:
    """Returns all OpType.CONSTANT nodes reachable from 'root'."""
    return [n for n in topological_sort(root) if n.op_type == OpType.CONSTANT]


def broadcast_shapes(
    shape1: Tuple[Optional[int], ...], shape2: Tuple[Optional[int], ...]
) -> Tuple[Optional[int], ...]:
    """Broadcasts two shapes according to numpy rules."""
    ndim1, ndim2 = len(shape1), len(shape2)
    out_ndim = max(ndim1, ndim2)

    # Prepend 1s
    s1 = (1,) * (out_ndim - ndim1) + tuple(shape1)
    s2 = (1,) * (out_ndim - ndim2) + tuple(shape2)

    out_shape = []
    for d1, d2 in zip(s1, s2):
        if d1 == 1:
            out_shape.append(d2)
        elif d2 == 1:
            out_shape.append(d1)
        elif d1 == d2:
            out_shape.append(d1)
        elif d1 is None or d2 is None:
            out_shape.append(None)
        else:
            raise ValueError(f"Cannot broadcast shapes {shape1} and {shape2}")

    return tuple(out_shape)
