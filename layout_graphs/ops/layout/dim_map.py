from typing import List, Dict, Any, Optional, Tuple

import numpy as np

from ...ir.node import TensorNode
from ...ir.dtypes import DType
from ..atomic_types import OpType
from ..atomic import cast_ref, gather_ref, mod_ref, to_numpy_backend
from ..interface import CompositeOp
from ..registry import register_composite
from .formats import FORMAT_RANK, Permutation, resolve

SUPPORTED_DTYPES = (DType.INT32, DType.INT64)


class AxisIndexRemapper:
    """
    Rewrites axis indices numbered under one format into the numbering of
    another, e.g. NHWC -> NCHW maps 1 (H) to 2 and -1 (C) to 1.

    Negative and out-of-range values wrap modulo 4 before the lookup.
    """

    def __init__(self, permutation: Permutation):
        self.permutation = permutation
        self.table = np.array(permutation.dst_index, dtype=np.int64)

    @classmethod
    def build(cls, src_format: str, dst_format: str) -> "AxisIndexRemapper":
        return cls(resolve(src_format, dst_format))

    @property
    def src_format(self) -> str:
        return self.permutation.src

    @property
    def dst_format(self) -> str:
        return self.permutation.dst

    def apply(self, indices: Any) -> np.ndarray:
        values = np.asarray(indices)
        if not np.issubdtype(values.dtype, np.integer):
            raise TypeError(
                f"Axis indices must be integral, got dtype {values.dtype}"
            )
        # Floor modulo in the input's own dtype, so no value can overflow.
        wrapped = np.mod(values, FORMAT_RANK)
        return np.asarray(self.table[wrapped]).astype(values.dtype, copy=False)

    def node(self, indices: TensorNode, name: Optional[str] = None) -> TensorNode:
        """Stages the remap as a DataFormatDimMap node over 'indices'."""
        if indices.dtype not in SUPPORTED_DTYPES:
            raise TypeError(
                f"{DataFormatDimMap.op_type} supports {[d.value for d in SUPPORTED_DTYPES]}, "
                f"got {indices.dtype.value}"
            )
        return TensorNode(
            DataFormatDimMap.op_type,
            indices.dtype,
            [indices],
            indices.shape,
            name=name or f"dim_map_{indices.name}",
            attrs={"src_format": self.src_format, "dst_format": self.dst_format},
            backend=indices.backend,
        )

    def __call__(self, indices: Any) -> np.ndarray:
        return self.apply(indices)

    def __repr__(self):
        return f"AxisIndexRemapper({self.src_format} -> {self.dst_format})"


@register_composite
class DataFormatDimMap(CompositeOp):
    op_type = "DataFormatDimMap"

    def decompose(
        self, inputs: List[TensorNode], attrs: Optional[Dict[str, Any]] = None
    ) -> TensorNode:
        """
        Cast(x -> int64) -> Mod(4) -> Gather(table) -> Cast(-> x.dtype)
        Inputs on another backend are copied to CPU_NUMPY first.
        """
        if len(inputs) != 1:
            raise ValueError(f"{self.op_type} requires exactly 1 input")
        if attrs is None or "src_format" not in attrs or "dst_format" not in attrs:
            raise ValueError(
                f"{self.op_type} requires 'src_format' and 'dst_format' in attributes"
            )

        x = inputs[0]
        remapper = AxisIndexRemapper.build(attrs["src_format"], attrs["dst_format"])
        x = to_numpy_backend(x)

        table = TensorNode(
            OpType.CONSTANT,
            DType.INT64,
            [],
            (FORMAT_RANK,),
            name=f"dim_table_{x.name}",
            attrs={"value": remapper.table},
        )
        rank = TensorNode(
            OpType.CONSTANT,
            DType.INT64,
            [],
            (),
            name=f"dim_rank_{x.name}",
            attrs={"value": np.array(FORMAT_RANK, dtype=np.int64)},
        )

        wide = x if x.dtype == DType.INT64 else cast_ref([x], {"to": DType.INT64})
        wrapped = mod_ref([wide, rank])
        gathered = gather_ref([table, wrapped])

        if x.dtype == DType.INT64:
            return gathered
        return cast_ref([gathered], {"to": x.dtype})

    def sample_inputs(self) -> List[Tuple[List[np.ndarray], Dict[str, Any]]]:
        scalar = np.array(-1, dtype=np.int32)
        vector = np.array([0, 1, 2, 3], dtype=np.int32)
        negatives = np.array([[-4, -3], [-2, -1]], dtype=np.int64)
        wide = np.array([7, -9, 2**40, -(2**40) - 1], dtype=np.int64)
        return [
            ([scalar], {"src_format": "NHWC", "dst_format": "NCHW"}),
            ([vector], {"src_format": "NHWC", "dst_format": "NCHW"}),
            ([vector], {"src_format": "NCHW", "dst_format": "NHWC"}),
            ([negatives], {"src_format": "NHWC", "dst_format": "HWNC"}),
            ([wide], {"src_format": "NHWC", "dst_format": "WCHN"}),
        ]
