# Expose main components for easy access
from .ir.node import TensorNode
from .ir.dtypes import DType
from .ops.atomic_types import OpType
from .ops.layout import (
    AxisIndexRemapper,
    VectorLayoutPermuter,
    Permutation,
    resolve,
    LayoutError,
    InvalidFormatError,
    NotAPermutationError,
    InvalidShapeError,
)
from .backend.reference import evaluate_graph
