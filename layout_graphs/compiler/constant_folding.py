from dataclasses import replace
from typing import Dict
from ..ir.node import TensorNode
from ..ops.atomic_types import OpType
from ..ir.graph import topological_sort
from ..ir.dtypes import DType
from ..backend.reference import evaluate_graph


class ConstantFolding:
    """
    Evaluates constant subgraphs and replaces them with a single OpType.CONSTANT node.
    Uses the reference evaluator, so folding goes through the same kernels
    (or decompositions) as eager execution.
    """

    @classmethod
    def fold(cls, root: TensorNode) -> TensorNode:
        """
        Returns the root of an equivalent graph with constant subgraphs folded.
        The original graph is left untouched.
        """
        node_map: Dict[TensorNode, TensorNode] = {}

        for node in topological_sort(root):
            if node.op_type in (OpType.INPUT, OpType.CONSTANT):
                node_map[node] = node
                continue

            parents = [node_map[p] for p in node.parents]
            if any(p is not q for p, q in zip(parents, node.parents)):
                current = replace(node, parents=parents, attrs=dict(node.attrs))
            else:
                current = node

            if parents and all(p.op_type == OpType.CONSTANT for p in parents):
                node_map[node] = cls._fold_node(current)
            else:
                node_map[node] = current

        return node_map[root]

    @classmethod
    def _fold_node(cls, node: TensorNode) -> TensorNode:
        try:
            value = evaluate_graph(node, {})
        except NotImplementedError:
            # No kernel or decomposition: leave the node for the runtime.
            return node

        return TensorNode(
            OpType.CONSTANT,
            DType.from_numpy(value.dtype),
            [],
            tuple(value.shape),
            name=f"folded_{node.name}",
            attrs={"value": value},
            backend=node.backend,
        )
