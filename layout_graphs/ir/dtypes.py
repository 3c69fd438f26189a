import math
from enum import Enum
from dataclasses import dataclass
from typing import Tuple, Optional, Any

import numpy as np


class DType(Enum):
    FP32 = "float32"
    INT32 = "int32"
    INT64 = "int64"

    @property
    def itemsize(self) -> int:
        """Returns the number of bytes per element."""
        return {
            DType.FP32: 4,
            DType.INT32: 4,
            DType.INT64: 8,
        }[self]

    @property
    def numpy_dtype(self) -> Any:
        return {
            DType.FP32: np.float32,
            DType.INT32: np.int32,
            DType.INT64: np.int64,
        }[self]

    @property
    def is_integer(self) -> bool:
        return self in (DType.INT32, DType.INT64)

    @classmethod
    def from_numpy(cls, np_dtype: Any) -> "DType":
        """Maps a numpy dtype (or anything np.dtype accepts) onto a DType."""
        np_dtype = np.dtype(np_dtype)
        for member in cls:
            if np.dtype(member.numpy_dtype) == np_dtype:
                return member
        raise TypeError(f"Unsupported numpy dtype: {np_dtype}")


def get_size_bytes(shape: Optional[Tuple[Optional[int], ...]], dtype: DType) -> int:
    """
    Centralized logic for calculating total byte size.
    Raises ValueError for dynamic shapes (containing None).
    """
    if shape is None or any(d is None for d in shape):
        raise ValueError(f"Cannot calculate byte size for dynamic shape: {shape}")

    # Handle scalar shapes ()
    if len(shape) == 0:
        return dtype.itemsize

    return math.prod(shape) * dtype.itemsize


class Backend(Enum):
    CPU_NUMPY = "cpu_numpy"
    CPU_TORCH = "cpu_torch"


@dataclass(frozen=True)
class TensorSignature:
    """
    Represents the Type, Shape, and Backend state of a tensor for kernel matching.

    - shape=None: Wildcard (matches any shape)
    - backend=None: Wildcard (matches any backend)
    """

    dtype: DType
    shape: Optional[Tuple[Optional[int], ...]] = None
    backend: Optional[Backend] = None

    def __repr__(self):
        shape_str = "*"
        if self.shape is not None:
            shape_str = ",".join(str(d) if d is not None else "*" for d in self.shape)

        backend_str = self.backend.value if self.backend else "*"
        return f"<{self.dtype.value} [{shape_str}] @ {backend_str}>"

    def is_scalar(self):
        if self.shape is None:
            return False
        return len(self.shape) == 0 or (len(self.shape) == 1 and self.shape[0] == 1)
