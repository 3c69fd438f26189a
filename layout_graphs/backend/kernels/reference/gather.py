import numpy as np
from ....backend.registry import KernelRegistry
from ....ir.dtypes import DType, TensorSignature
from ....ops.atomic_types import OpType
from ....ops.atomic.gather import gather_ref


def gather_axis0(inputs, attrs=None):
    """
    Gather Implementation.
    inputs[0]: Data tensor (Any Rank >= 1)
    inputs[1]: Indices (Any Rank)

    Performs data[indices] (axis=0 gather).
    """
    data = np.asarray(inputs[0])
    indices = np.asarray(inputs[1])
    return np.take(data, indices, axis=0)


for _data_dtype in (DType.INT32, DType.INT64):
    for _index_dtype in (DType.INT32, DType.INT64):
        KernelRegistry.register(
            OpType.GATHER,
            [
                TensorSignature(_data_dtype, shape=None),
                TensorSignature(_index_dtype, shape=None),
            ],
            target_dtype=_data_dtype,
            reference_factory=gather_ref,
        )(gather_axis0)
