import numpy as np
import pytest
from layout_graphs import config
from layout_graphs.ir.node import TensorNode
from layout_graphs.ir.dtypes import DType
from layout_graphs.ops.atomic_types import OpType
from layout_graphs.ops.layout import AxisIndexRemapper
from layout_graphs.backend.reference import evaluate_graph


@pytest.fixture
def debug_execution(monkeypatch):
    monkeypatch.setattr(config, "DEBUG_EXECUTION", True)
    monkeypatch.setattr(config, "DEBUG_DETAILED", True)


def test_missing_input_raises():
    x = TensorNode(OpType.INPUT, DType.INT32, [], (2,), "x")
    node = AxisIndexRemapper.build("NHWC", "NCHW").node(x)
    with pytest.raises(ValueError, match="Missing input data for node: x"):
        evaluate_graph(node, {})


def test_unknown_op_raises():
    x = TensorNode(OpType.INPUT, DType.INT32, [], (2,), "x")
    node = TensorNode("NoSuchOp", DType.INT32, [x], (2,), "bad")
    with pytest.raises(NotImplementedError, match="NoSuchOp"):
        evaluate_graph(node, {"x": np.zeros(2, dtype=np.int32)})


def test_shared_parent_evaluated_once():
    x = TensorNode(OpType.INPUT, DType.INT64, [], (2,), "x")
    forward = AxisIndexRemapper.build("NHWC", "NCHW").node(x)
    backward = AxisIndexRemapper.build("NCHW", "NHWC").node(forward)

    res = evaluate_graph(backward, {"x": np.array([1, 3], dtype=np.int64)})
    np.testing.assert_array_equal(res, [1, 3])


def test_debug_trace(debug_execution, capsys):
    x = TensorNode(OpType.INPUT, DType.INT32, [], (2,), "x")
    node = AxisIndexRemapper.build("NHWC", "NCHW").node(x)

    evaluate_graph(node, {"x": np.array([0, 1], dtype=np.int32)}, prefer_decomposition=True)

    out = capsys.readouterr().out
    assert "[DEBUG] Evaluating node" in out
    assert "Decomposing DataFormatDimMap" in out
    assert "Node: dim_map_x [DataFormatDimMap]" in out
