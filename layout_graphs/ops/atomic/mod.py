from typing import List, Dict, Any, Optional
from ...ir.node import TensorNode
from ...ir.graph import broadcast_shapes
from ..atomic_types import OpType
from ..registry import register_reference_factory


def mod_ref(
    inputs: List[TensorNode], attrs: Optional[Dict[str, Any]] = None
) -> TensorNode:
    """
    Reference graph for Mod: A mod B with floor semantics, so the result
    always takes the sign of the divisor (-1 mod 4 == 3).
    """
    if len(inputs) != 2:
        raise ValueError("Mod requires exactly 2 inputs: dividend and divisor")

    a, b = inputs
    if a.dtype != b.dtype:
        raise ValueError(
            f"Mod inputs must share a dtype, got {a.dtype.value} and {b.dtype.value}"
        )

    if a.shape is None or b.shape is None:
        out_shape = None
    else:
        out_shape = broadcast_shapes(a.shape, b.shape)

    return TensorNode(
        OpType.MOD,
        a.dtype,
        [a, b],
        out_shape,
        name=f"mod_{a.name}_{b.name}",
        backend=a.backend,
    )


register_reference_factory(OpType.MOD, mod_ref)
