"""
File: layout_graphs/backend/reference.py
"""

import numpy as np
from typing import Dict, Any
from ..ops.atomic_types import OpType
from ..ir.node import TensorNode
from ..backend.registry import KernelRegistry
from ..ops.registry import get_composite_op
from .. import config
from .kernels import *


def evaluate_graph(
    root: TensorNode,
    inputs: Dict[str, Any],
    prefer_decomposition: bool = False,
) -> np.ndarray:
    """
    Eagerly evaluates the graph ending at 'root'.

    Each node runs the best registered kernel for its signature. Composite
    ops without a kernel (or every composite op, with prefer_decomposition)
    are lowered to their atomic decomposition, which is evaluated in place.
    """
    cache: Dict[TensorNode, np.ndarray] = {}

    def _eval(node: TensorNode):
        if node in cache:
            return cache[node]

        if config.DEBUG_EXECUTION:
            print(f"[DEBUG] Evaluating node: {node}")
            if config.DEBUG_DETAILED:
                print(node.get_details())

        if node.op_type == OpType.INPUT:
            if node.name not in inputs:
                raise ValueError(f"Missing input data for node: {node.name}")
            val = np.asarray(inputs[node.name])
        elif node.op_type == OpType.CONSTANT:
            if node.get_attr("value") is None:
                raise ValueError(f"Constant node '{node.name}' has no 'value'")
            val = np.asarray(node.attrs["value"])
        else:
            # 1. Evaluate Parents
            parent_vals = [_eval(p) for p in node.parents]
            input_sigs = [p.signature for p in node.parents]

            composite = get_composite_op(node.op_type)

            # 2. Try Kernel
            kernel = None
            if composite is None or not prefer_decomposition:
                kernel = KernelRegistry.select_best_kernel(
                    node.op_type, input_sigs, node.backend, target_dtype=node.dtype
                )

            if kernel:
                val = np.asarray(kernel(parent_vals, node.attrs))
            elif composite:
                # 3. Decompose using the PARENT NODES (not values)
                if config.DEBUG_EXECUTION:
                    print(f"[DEBUG]  -> Decomposing {node.op_type}")
                decomp_root = composite.decompose(node.parents, node.attrs)
                val = _eval(decomp_root)
            else:
                if OpType.is_atomic(node.op_type):
                    raise NotImplementedError(
                        f"No registered kernel for atomic op '{node.op_type}'\n{node.get_details()}"
                    )
                raise NotImplementedError(
                    f"No valid kernel or decomposition for '{node.op_type}'\n{node.get_details()}"
                )

        cache[node] = val
        return val

    return _eval(root)
