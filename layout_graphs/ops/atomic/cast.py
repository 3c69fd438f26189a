from typing import List, Dict, Any, Optional
from ...ir.node import TensorNode
from ..atomic_types import OpType
from ..registry import register_reference_factory


def cast_ref(
    inputs: List[TensorNode], attrs: Optional[Dict[str, Any]] = None
) -> TensorNode:
    """
    Reference graph for Cast: A -> B (cast from input dtype to target dtype)
    attrs['to']: DType
    """
    if len(inputs) != 1:
        raise ValueError("Cast requires exactly 1 input")
    if attrs is None or "to" not in attrs:
        raise ValueError("Cast requires 'to' (target dtype) in attributes")

    input_tensor = inputs[0]
    target_dtype = attrs["to"]

    return TensorNode(
        OpType.CAST,
        target_dtype,
        [input_tensor],
        input_tensor.shape,
        name=f"cast_{input_tensor.name}",
        attrs={"to": target_dtype},
        backend=input_tensor.backend,
    )


register_reference_factory(OpType.CAST, cast_ref)
