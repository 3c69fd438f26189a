from typing import List, Dict, Any, Optional, Tuple

import numpy as np

from ...ir.node import TensorNode
from ...ir.dtypes import DType
from ..atomic_types import OpType
from ..atomic import gather_ref, to_numpy_backend
from ..interface import CompositeOp
from ..registry import register_composite
from .formats import FORMAT_RANK, InvalidShapeError, Permutation, resolve

SUPPORTED_DTYPES = (DType.INT32, DType.INT64)


def check_layout_shape(shape: Tuple[Optional[int], ...]) -> None:
    """
    A layout vector is a (4,) vector or a (4, 2) matrix, one row per axis.
    Dynamic (None) dimensions are accepted until they become concrete.
    """
    shape = tuple(shape)
    if len(shape) not in (1, 2):
        raise InvalidShapeError(
            f"Input must be a vector or matrix, but got shape {shape}"
        )
    if shape[0] is not None and shape[0] != FORMAT_RANK:
        raise InvalidShapeError(
            f"First dimension of input must be of size {FORMAT_RANK}, but got shape {shape}"
        )
    if len(shape) == 2 and shape[1] is not None and shape[1] != 2:
        raise InvalidShapeError(
            f"Second dimension of 2D input must be of size 2, but got shape {shape}"
        )


class VectorLayoutPermuter:
    """
    Reorders the rows of a shape-like vector from one format to another,
    e.g. NHWC -> NCHW turns [n, h, w, c] into [n, c, h, w].
    """

    def __init__(self, permutation: Permutation):
        self.permutation = permutation
        self.rows = np.array(permutation.src_index, dtype=np.int64)

    @classmethod
    def build(cls, src_format: str, dst_format: str) -> "VectorLayoutPermuter":
        return cls(resolve(src_format, dst_format))

    @property
    def src_format(self) -> str:
        return self.permutation.src

    @property
    def dst_format(self) -> str:
        return self.permutation.dst

    def apply(self, vector: Any) -> np.ndarray:
        values = np.asarray(vector)
        check_layout_shape(values.shape)
        return values[self.rows]

    def node(self, vector: TensorNode, name: Optional[str] = None) -> TensorNode:
        """Stages the reorder as a DataFormatVecPermute node over 'vector'."""
        if vector.dtype not in SUPPORTED_DTYPES:
            raise TypeError(
                f"{DataFormatVecPermute.op_type} supports {[d.value for d in SUPPORTED_DTYPES]}, "
                f"got {vector.dtype.value}"
            )
        if vector.shape is not None:
            check_layout_shape(vector.shape)
        return TensorNode(
            DataFormatVecPermute.op_type,
            vector.dtype,
            [vector],
            vector.shape,
            name=name or f"vec_permute_{vector.name}",
            attrs={"src_format": self.src_format, "dst_format": self.dst_format},
            backend=vector.backend,
        )

    def __call__(self, vector: Any) -> np.ndarray:
        return self.apply(vector)

    def __repr__(self):
        return f"VectorLayoutPermuter({self.src_format} -> {self.dst_format})"


@register_composite
class DataFormatVecPermute(CompositeOp):
    op_type = "DataFormatVecPermute"

    def decompose(
        self, inputs: List[TensorNode], attrs: Optional[Dict[str, Any]] = None
    ) -> TensorNode:
        """
        Gather(x, Constant(rows)) along axis 0.
        Inputs on another backend are copied to CPU_NUMPY first.
        """
        if len(inputs) != 1:
            raise ValueError(f"{self.op_type} requires exactly 1 input")
        if attrs is None or "src_format" not in attrs or "dst_format" not in attrs:
            raise ValueError(
                f"{self.op_type} requires 'src_format' and 'dst_format' in attributes"
            )

        x = inputs[0]
        if x.shape is not None:
            check_layout_shape(x.shape)
        permuter = VectorLayoutPermuter.build(attrs["src_format"], attrs["dst_format"])
        x = to_numpy_backend(x)

        rows = TensorNode(
            OpType.CONSTANT,
            DType.INT64,
            [],
            (FORMAT_RANK,),
            name=f"vec_rows_{x.name}",
            attrs={"value": permuter.rows},
        )
        return gather_ref([x, rows])

    def infer_shape(self, node: TensorNode) -> None:
        if node.parents and node.parents[0].shape is not None:
            check_layout_shape(node.parents[0].shape)
            node.shape = node.parents[0].shape

    def sample_inputs(self) -> List[Tuple[List[np.ndarray], Dict[str, Any]]]:
        shape = np.array([8, 224, 224, 3], dtype=np.int32)
        strides = np.array([[0, 1], [2, 3], [4, 5], [6, 7]], dtype=np.int64)
        return [
            ([shape], {"src_format": "NHWC", "dst_format": "NCHW"}),
            ([shape], {"src_format": "NCHW", "dst_format": "NHWC"}),
            ([strides], {"src_format": "NHWC", "dst_format": "NCHW"}),
            ([strides], {"src_format": "NHWC", "dst_format": "HWNC"}),
        ]
