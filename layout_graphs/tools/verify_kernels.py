import sys
from layout_graphs.backend.verifier import KernelVerifier


def main() -> int:
    results = KernelVerifier.verify_all_composite_kernels(progress=True)
    for label in results["passed"]:
        print(f"[PASS] {label}")
    for label in results["skipped"]:
        print(f"[SKIP] {label}")
    for label, error in results["failed"]:
        print(f"[FAIL] {label}\n{error}")
    print(
        f"{len(results['passed'])} passed, {len(results['failed'])} failed, "
        f"{len(results['skipped'])} skipped"
    )
    return 1 if results["failed"] else 0


if __name__ == "__main__":
    sys.exit(main())
