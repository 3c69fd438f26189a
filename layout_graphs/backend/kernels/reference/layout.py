"""
Fused numpy kernels for the layout ops. Each one performs the whole
remap/reorder in a single call instead of walking the decomposition.
"""

from ....backend.registry import KernelRegistry
from ....ir.dtypes import DType, TensorSignature
from ....ops.layout import AxisIndexRemapper, VectorLayoutPermuter
from ....ops.layout import DataFormatDimMap, DataFormatVecPermute


@KernelRegistry.register(
    DataFormatDimMap.op_type, [TensorSignature(DType.INT32, shape=None)]
)
@KernelRegistry.register(
    DataFormatDimMap.op_type, [TensorSignature(DType.INT64, shape=None)]
)
def data_format_dim_map(inputs, attrs=None):
    remapper = AxisIndexRemapper.build(attrs["src_format"], attrs["dst_format"])
    return remapper.apply(inputs[0])


@KernelRegistry.register(
    DataFormatVecPermute.op_type, [TensorSignature(DType.INT32, shape=None)]
)
@KernelRegistry.register(
    DataFormatVecPermute.op_type, [TensorSignature(DType.INT64, shape=None)]
)
def data_format_vec_permute(inputs, attrs=None):
    permuter = VectorLayoutPermuter.build(attrs["src_format"], attrs["dst_format"])
    return permuter.apply(inputs[0])
