import numpy as np
from ....backend.registry import KernelRegistry
from ....ir.dtypes import DType, TensorSignature
from ....ops.atomic.mod import mod_ref
from ....ops.atomic_types import OpType


# --- Generic Tensor (Any Rank), floor modulo ---
@KernelRegistry.register(
    OpType.MOD,
    [TensorSignature(DType.INT32, shape=None), TensorSignature(DType.INT32, shape=None)],
    reference_factory=mod_ref,
)
@KernelRegistry.register(
    OpType.MOD,
    [TensorSignature(DType.INT64, shape=None), TensorSignature(DType.INT64, shape=None)],
    reference_factory=mod_ref,
)
def mod_generic_tensor(inputs, attrs=None):
    """
    inputs: [a, b]
    np.mod follows the sign of the divisor, so a negative 'a' with a
    positive 'b' always lands in [0, b).
    """
    return np.mod(inputs[0], inputs[1])
