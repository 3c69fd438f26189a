from layout_graphs.backend.registry import KernelRegistry
from layout_graphs.ops.registry import list_composite_ops

# Import all kernels to ensure registry is populated
import layout_graphs.backend.kernels


def check():
    kernels = KernelRegistry.get_all_kernels()
    for op_type, backends in kernels.items():
        print(f"Op: {op_type}")
        for backend, entries in backends.items():
            print(f"  Backend: {backend.value}")
            for num, entry in enumerate(entries):
                # entry is (backend, sigs, target_dtype, func)
                print(f"    {num} Sigs: {entry[1]}")
                print(f"    {num} Target DType: {entry[2]}")
    print(f"Composite ops: {', '.join(list_composite_ops())}")


if __name__ == "__main__":
    check()
