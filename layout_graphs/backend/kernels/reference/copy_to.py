"""
File: layout_graphs/backend/kernels/reference/copy_to.py
"""

import numpy as np
from ....backend.registry import KernelRegistry
from ....ir.dtypes import DType, TensorSignature, Backend
from ....ops.atomic_types import OpType
from ....ops.atomic.copy_to import copy_to_ref


def copy_to_numpy(inputs, attrs=None):
    data = inputs[0]
    # Torch tensors may live on another device
    if hasattr(data, "detach"):
        data = data.detach().cpu().numpy()
    return np.ascontiguousarray(data)


# These kernels live on CPU_NUMPY (the destination) and accept input from
# either CPU backend.
for _dtype in (DType.INT32, DType.INT64):
    for _src in (Backend.CPU_NUMPY, Backend.CPU_TORCH):
        KernelRegistry.register(
            OpType.COPY_TO,
            [TensorSignature(_dtype, shape=None, backend=_src)],
            backend=Backend.CPU_NUMPY,
            reference_factory=copy_to_ref,
        )(copy_to_numpy)
