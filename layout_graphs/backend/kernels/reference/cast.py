"""
File: layout_graphs/backend/kernels/reference/cast.py
"""

from ....backend.registry import KernelRegistry
from ....ir.dtypes import DType, TensorSignature
from ....ops.atomic_types import OpType
from ....ops.atomic.cast import cast_ref


def cast_implementation(inputs, attrs=None):
    if attrs is None or "to" not in attrs:
        raise ValueError("Cast requires 'to' (target dtype) in attributes")
    target_dtype = attrs["to"]
    return inputs[0].astype(target_dtype.numpy_dtype)


# --- Explicit Registrations for Planner Visibility ---


# 1. INT32 -> INT64 (widening, exact)
@KernelRegistry.register(
    OpType.CAST,
    [TensorSignature(DType.INT32, shape=None)],
    target_dtype=DType.INT64,
    reference_factory=cast_ref,
)
# 2. INT64 -> INT32 (narrowing, wraps on overflow like numpy)
@KernelRegistry.register(
    OpType.CAST,
    [TensorSignature(DType.INT64, shape=None)],
    target_dtype=DType.INT32,
    reference_factory=cast_ref,
)
def cast_wrappers(inputs, attrs=None):
    return cast_implementation(inputs, attrs)
