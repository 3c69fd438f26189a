import unittest
import numpy as np
from layout_graphs.ir.node import TensorNode
from layout_graphs.ir.dtypes import DType
from layout_graphs.ir.graph import topological_sort, get_inputs, get_constants, broadcast_shapes
from layout_graphs.ops.atomic_types import OpType
from layout_graphs.ops.layout import AxisIndexRemapper, VectorLayoutPermuter, DataFormatDimMap


class TestGraphBuild(unittest.TestCase):
    def test_topo_sort(self):
        x = TensorNode(OpType.INPUT, DType.INT32, [], (4,), "x")
        permute = VectorLayoutPermuter.build("NHWC", "NCHW").node(x)
        remap = AxisIndexRemapper.build("NCHW", "NHWC").node(permute)

        sorted_nodes = topological_sort(remap)

        self.assertEqual(sorted_nodes, [x, permute, remap])

    def test_get_inputs(self):
        a = TensorNode(OpType.INPUT, DType.INT32, [], (4,), "A")
        root = DataFormatDimMap().decompose(
            [a], {"src_format": "NHWC", "dst_format": "NCHW"}
        )

        inputs = get_inputs(root)
        self.assertEqual(inputs, [a])

        constants = get_constants(root)
        self.assertEqual(len(constants), 2)

    def test_node_details(self):
        x = TensorNode(OpType.INPUT, DType.INT64, [], (4, 2), "strides")
        node = VectorLayoutPermuter.build("NHWC", "NCHW").node(x)

        details = node.get_details()
        self.assertIn("DataFormatVecPermute", details)
        self.assertIn("src_format", details)
        self.assertIn("Size (bytes)     : 64", details)
        self.assertIn("strides", details)

    def test_dtype_from_numpy(self):
        self.assertEqual(DType.from_numpy(np.int32), DType.INT32)
        self.assertEqual(DType.from_numpy(np.dtype("int64")), DType.INT64)
        with self.assertRaises(TypeError):
            DType.from_numpy(np.int8)

    def test_broadcast_shapes(self):
        self.assertEqual(broadcast_shapes((2, 1), (3,)), (2, 3))
        self.assertEqual(broadcast_shapes((4,), ()), (4,))
        self.assertEqual(broadcast_shapes((None, 4), (1, 4)), (None, 4))
        with self.assertRaises(ValueError):
            broadcast_shapes((3,), (4,))


if __name__ == "__main__":
    unittest.main()
