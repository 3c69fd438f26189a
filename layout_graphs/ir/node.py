from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any
import uuid
from .dtypes import DType, TensorSignature, Backend, get_size_bytes


@dataclass(eq=False)
class TensorNode:
    op_type: str
    dtype: DType
    parents: List["TensorNode"]
    shape: Optional[Tuple[Optional[int], ...]] = None
    name: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    attrs: Dict[str, Any] = field(default_factory=dict)
    backend: Backend = Backend.CPU_NUMPY

    def get_attr(self, key: str, default: Any = None) -> Any:
        return self.attrs.get(key, default)

    @property
    def signature(self) -> TensorSignature:
        return TensorSignature(self.dtype, self.shape, self.backend)

    def get_details(self) -> str:
        out_sig = f"{self.dtype.name} | {self.shape}"
        lines = []
        header = f"Node: {self.name} [{self.op_type}]"
        lines.append(header)
        lines.append("-" * len(header))
        lines.append(f"Output Signature : {out_sig}")
        try:
            lines.append(f"Size (bytes)     : {get_size_bytes(self.shape, self.dtype)}")
        except ValueError:
            lines.append("Size (bytes)     : dynamic")
        lines.append(f"Backend          : {self.backend}")
        lines.append("Parents          :")
        if not self.parents:
            lines.append("  (None - Leaf Node)")
        else:
            for idx, parent in enumerate(self.parents):
                p_sig = f"{parent.dtype.name} | {parent.shape}"
                lines.append(f"  [{idx}] {parent.name:<10} -> {p_sig}")
        if self.attrs:
            lines.append("Attributes       :")
            for k, v in self.attrs.items():
                lines.append(f"  {k:<14} : {v}")
        return "\n".join(lines)

    def __repr__(self):
        attr_keys = list(self.attrs.keys()) if self.attrs else []
        attrs_summary = f" | attrs={attr_keys}" if attr_keys else ""
        return f"[{self.dtype.value}|{self.shape}{attrs_summary}] {self.op_type}({self.name})"
