import numpy as np
import pytest
from layout_graphs.ir.node import TensorNode
from layout_graphs.ir.dtypes import DType, Backend
from layout_graphs.ops.atomic_types import OpType
from layout_graphs.ops.layout import (
    VectorLayoutPermuter,
    DataFormatVecPermute,
    InvalidShapeError,
    LayoutError,
)
from layout_graphs.backend.reference import evaluate_graph


def test_vector_nhwc_to_nchw():
    permuter = VectorLayoutPermuter.build("NHWC", "NCHW")
    shape = np.array([8, 224, 112, 3], dtype=np.int32)
    res = permuter.apply(shape)
    np.testing.assert_array_equal(res, [8, 3, 224, 112])
    assert res.dtype == np.int32


def test_vector_nchw_to_nhwc():
    permuter = VectorLayoutPermuter.build("NCHW", "NHWC")
    res = permuter.apply(np.array([8, 3, 224, 112], dtype=np.int64))
    np.testing.assert_array_equal(res, [8, 224, 112, 3])


def test_matrix_rows_move_together():
    permuter = VectorLayoutPermuter.build("NHWC", "NCHW")
    rows = np.array([[0, 1], [10, 11], [20, 21], [30, 31]], dtype=np.int32)
    res = permuter.apply(rows)
    np.testing.assert_array_equal(res, [[0, 1], [30, 31], [10, 11], [20, 21]])
    assert res.shape == (4, 2)


def test_round_trip():
    forward = VectorLayoutPermuter.build("NHWC", "WNCH")
    backward = VectorLayoutPermuter.build("WNCH", "NHWC")
    x = np.array([5, 6, 7, 8], dtype=np.int64)
    np.testing.assert_array_equal(backward.apply(forward.apply(x)), x)


def test_identity_permute():
    permuter = VectorLayoutPermuter.build("NHWC", "NHWC")
    x = np.array([[1, 2], [3, 4], [5, 6], [7, 8]], dtype=np.int32)
    np.testing.assert_array_equal(permuter.apply(x), x)


def test_input_not_modified():
    permuter = VectorLayoutPermuter.build("NHWC", "NCHW")
    x = np.array([1, 2, 3, 4], dtype=np.int32)
    permuter.apply(x)
    np.testing.assert_array_equal(x, [1, 2, 3, 4])


@pytest.mark.parametrize(
    "shape, match",
    [
        ((3,), "First dimension of input must be of size 4"),
        ((4, 3), "Second dimension of 2D input must be of size 2"),
        ((5, 2), "First dimension of input must be of size 4"),
        ((4, 2, 1), "Input must be a vector or matrix"),
        ((), "Input must be a vector or matrix"),
    ],
)
def test_bad_shapes_rejected(shape, match):
    permuter = VectorLayoutPermuter.build("NHWC", "NCHW")
    with pytest.raises(InvalidShapeError, match=match):
        permuter.apply(np.zeros(shape, dtype=np.int32))


def test_shape_error_names_shape():
    permuter = VectorLayoutPermuter.build("NHWC", "NCHW")
    with pytest.raises(LayoutError, match=r"\(4, 3\)"):
        permuter.apply(np.zeros((4, 3), dtype=np.int32))


def test_node_staging_checks_declared_shape():
    permuter = VectorLayoutPermuter.build("NHWC", "NCHW")
    bad = TensorNode(OpType.INPUT, DType.INT32, [], (3,), "shape")
    with pytest.raises(InvalidShapeError):
        permuter.node(bad)

    good = TensorNode(OpType.INPUT, DType.INT32, [], (4, 2), "strides")
    node = permuter.node(good)
    assert node.op_type == DataFormatVecPermute.op_type
    assert node.shape == (4, 2)


@pytest.mark.parametrize("prefer_decomposition", [False, True])
def test_evaluate_staged_graph(prefer_decomposition):
    permuter = VectorLayoutPermuter.build("NHWC", "NCHW")
    x = TensorNode(OpType.INPUT, DType.INT64, [], (4,), "shape")
    node = permuter.node(x)

    val = np.array([2, 32, 16, 64], dtype=np.int64)
    res = evaluate_graph(node, {"shape": val}, prefer_decomposition=prefer_decomposition)
    np.testing.assert_array_equal(res, [2, 64, 32, 16])
    assert res.dtype == np.int64


def test_evaluate_checks_runtime_shape():
    permuter = VectorLayoutPermuter.build("NHWC", "NCHW")
    x = TensorNode(OpType.INPUT, DType.INT32, [], None, "shape")
    node = permuter.node(x)
    with pytest.raises(InvalidShapeError):
        evaluate_graph(node, {"shape": np.zeros((4, 3), dtype=np.int32)})


def test_decomposition_is_single_gather():
    x = TensorNode(OpType.INPUT, DType.INT32, [], (4, 2), "strides")
    root = DataFormatVecPermute().decompose(
        [x], {"src_format": "NHWC", "dst_format": "NCHW"}
    )
    assert root.op_type == OpType.GATHER
    assert root.shape == (4, 2)
    data, rows = root.parents
    assert data is x
    np.testing.assert_array_equal(rows.attrs["value"], [0, 3, 1, 2])


def test_torch_backend_node_evaluates_through_decomposition():
    x = TensorNode(OpType.INPUT, DType.INT64, [], (4,), "dims", backend=Backend.CPU_TORCH)
    node = VectorLayoutPermuter.build("NHWC", "NCHW").node(x)
    assert node.backend == Backend.CPU_TORCH

    val = np.array([8, 224, 224, 3], dtype=np.int64)
    res = evaluate_graph(node, {"dims": val}, prefer_decomposition=True)

    np.testing.assert_array_equal(res, [8, 3, 224, 224])
    assert res.dtype == np.int64
