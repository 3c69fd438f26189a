import numpy as np
from typing import Dict, Any, List, Tuple
from tqdm import tqdm
from ..ir.node import TensorNode
from ..ir.dtypes import DType, TensorSignature
from ..ops.atomic_types import OpType
from ..ops.interface import CompositeOp
from ..ops.registry import get_composite_op
from .. import config
from .registry import KernelRegistry
from .reference import evaluate_graph


class VerificationError(Exception):
    pass


class KernelVerifier:
    @staticmethod
    def verify_all_composite_kernels(progress: bool = False) -> Dict[str, List[Any]]:
        """
        Iterates over all registered kernels. If the op is Composite,
        verifies the kernel output matches the decomposed graph output.
        """
        kernels = KernelRegistry.get_all_kernels()

        results: Dict[str, List[Any]] = {
            "passed": [],
            "failed": [],
            "skipped": [],  # Atomic ops or ops with no composite def
        }

        for op_type, backends in tqdm(
            list(kernels.items()), desc="Verifying kernels", disable=not progress
        ):
            # 1. Skip Atomic Ops (They are the ground truth)
            if OpType.is_atomic(op_type):
                results["skipped"].append(f"{op_type} (Atomic)")
                continue

            # 2. Check for CompositeOp definition
            composite_op = get_composite_op(op_type)
            if not composite_op:
                error_msg = f"Op '{op_type}' has registered kernels but NO CompositeOp definition."
                print(f"[FAIL] {error_msg}")
                results["failed"].append((op_type, error_msg))
                continue

            # 3. Verify Each Kernel for this Composite Op
            samples = composite_op.sample_inputs()
            if not samples:
                print(f"[WARN] Op '{op_type}' has no test samples defined in sample_inputs().")
                results["skipped"].append(f"{op_type} (No Samples)")
                continue

            for backend, kernel_entries in backends.items():
                for _, signatures, _, kernel_func in kernel_entries:
                    label = f"{op_type}::{backend.value}::{list(signatures)}"
                    try:
                        checked = KernelVerifier._verify_single_kernel(
                            composite_op, signatures, kernel_func, samples
                        )
                    except VerificationError as e:
                        print(f"[FAIL] {label} - {e}")
                        results["failed"].append((label, str(e)))
                        continue
                    if checked:
                        results["passed"].append(label)
                    else:
                        results["skipped"].append(f"{label} (No Matching Samples)")

        return results

    @staticmethod
    def _matches(signatures: Tuple[TensorSignature, ...], inputs_data) -> bool:
        if len(signatures) != len(inputs_data):
            return False
        for sig, val in zip(signatures, inputs_data):
            if DType.from_numpy(val.dtype) != sig.dtype:
                return False
            if sig.shape is not None and len(sig.shape) != val.ndim:
                return False
        return True

    @staticmethod
    def _verify_single_kernel(
        composite_op: CompositeOp, signatures, kernel_func, samples
    ) -> int:
        """Returns the number of samples checked against this kernel."""
        checked = 0
        for inputs_data, attrs in samples:
            if not KernelVerifier._matches(signatures, inputs_data):
                continue

            # 1. Create Input Nodes
            input_nodes = []
            data_map = {}
            for i, val in enumerate(inputs_data):
                name = f"in_{i}"
                node = TensorNode(
                    OpType.INPUT, DType.from_numpy(val.dtype), [], val.shape, name
                )
                input_nodes.append(node)
                data_map[name] = val

            # 2. Run Kernel
            try:
                kernel_out = kernel_func(inputs_data, attrs)
            except Exception as e:
                raise VerificationError(f"Kernel execution failed: {e}") from e

            # 3. Run Decomposition (Reference)
            try:
                decomp_root = composite_op.decompose(input_nodes, attrs)
                ref_out = evaluate_graph(decomp_root, data_map)
            except Exception as e:
                raise VerificationError(f"Reference graph execution failed: {e}") from e

            # 4. Compare
            if kernel_out.dtype != ref_out.dtype:
                raise VerificationError(
                    f"DType mismatch: kernel {kernel_out.dtype}, reference {ref_out.dtype}"
                )
            try:
                np.testing.assert_allclose(
                    kernel_out,
                    ref_out,
                    rtol=config.VERIFY_RTOL,
                    atol=config.VERIFY_ATOL,
                    err_msg=f"Output mismatch for attrs={attrs}",
                )
            except AssertionError as e:
                raise VerificationError(str(e)) from e
            checked += 1
        return checked
