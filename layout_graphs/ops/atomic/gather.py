from typing import List, Dict, Any, Optional
from ...ir.node import TensorNode
from ..atomic_types import OpType
from ..registry import register_reference_factory


def gather_ref(
    inputs: List[TensorNode], attrs: Optional[Dict[str, Any]] = None
) -> TensorNode:
    """
    Reference graph for Gather: data[indices] (axis=0 gather)
    inputs[0]: Data tensor (any rank >= 1)
    inputs[1]: Indices tensor (any rank)
    """
    if len(inputs) != 2:
        raise ValueError("Gather requires exactly 2 inputs: data and indices")

    data, indices = inputs
    if not indices.dtype.is_integer:
        raise TypeError(f"Gather indices must be integral, got {indices.dtype.value}")

    if data.shape is None or indices.shape is None:
        out_shape = None
    else:
        out_shape = tuple(indices.shape) + tuple(data.shape[1:])

    return TensorNode(
        OpType.GATHER,
        data.dtype,
        [data, indices],
        out_shape,
        name=f"gather_{data.name}_{indices.name}",
        backend=data.backend,
    )


register_reference_factory(OpType.GATHER, gather_ref)
