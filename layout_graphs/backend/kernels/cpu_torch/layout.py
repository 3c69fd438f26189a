# layout_graphs/backend/kernels/cpu_torch/layout.py
#
# Torch lowering of the layout ops: the lookup table is a constant tensor
# and both ops end in an index_select along dim 0.

import numpy as np
import torch
from ...registry import KernelRegistry
from ....ir.dtypes import DType, TensorSignature, Backend
from ....ops.layout import AxisIndexRemapper, VectorLayoutPermuter
from ....ops.layout import DataFormatDimMap, DataFormatVecPermute, check_layout_shape
from ....ops.layout.formats import FORMAT_RANK


@KernelRegistry.register(
    DataFormatDimMap.op_type,
    [TensorSignature(DType.INT32, shape=None, backend=Backend.CPU_TORCH)],
    backend=Backend.CPU_TORCH,
)
@KernelRegistry.register(
    DataFormatDimMap.op_type,
    [TensorSignature(DType.INT64, shape=None, backend=Backend.CPU_TORCH)],
    backend=Backend.CPU_TORCH,
)
def data_format_dim_map_torch(inputs, attrs=None):
    remapper = AxisIndexRemapper.build(attrs["src_format"], attrs["dst_format"])
    values = np.asarray(inputs[0])

    x = torch.as_tensor(values).to(torch.int64)
    table = torch.as_tensor(remapper.table, dtype=torch.int64)
    wrapped = torch.remainder(x, FORMAT_RANK)
    out = torch.index_select(table, 0, wrapped.reshape(-1)).reshape(wrapped.shape)
    return out.numpy().astype(values.dtype, copy=False)


@KernelRegistry.register(
    DataFormatVecPermute.op_type,
    [TensorSignature(DType.INT32, shape=None, backend=Backend.CPU_TORCH)],
    backend=Backend.CPU_TORCH,
)
@KernelRegistry.register(
    DataFormatVecPermute.op_type,
    [TensorSignature(DType.INT64, shape=None, backend=Backend.CPU_TORCH)],
    backend=Backend.CPU_TORCH,
)
def data_format_vec_permute_torch(inputs, attrs=None):
    permuter = VectorLayoutPermuter.build(attrs["src_format"], attrs["dst_format"])
    values = np.asarray(inputs[0])
    check_layout_shape(values.shape)

    x = torch.as_tensor(values)
    rows = torch.as_tensor(permuter.rows, dtype=torch.int64)
    return torch.index_select(x, 0, rows).numpy()
