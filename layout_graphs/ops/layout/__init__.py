from .formats import (
    FORMAT_RANK,
    Permutation,
    resolve,
    LayoutError,
    InvalidFormatError,
    NotAPermutationError,
    InvalidShapeError,
)
from .dim_map import AxisIndexRemapper, DataFormatDimMap
from .vec_permute import VectorLayoutPermuter, DataFormatVecPermute, check_layout_shape

__all__ = [
    "FORMAT_RANK",
    "Permutation",
    "resolve",
    "LayoutError",
    "InvalidFormatError",
    "NotAPermutationError",
    "InvalidShapeError",
    "AxisIndexRemapper",
    "DataFormatDimMap",
    "VectorLayoutPermuter",
    "DataFormatVecPermute",
    "check_layout_shape",
]
