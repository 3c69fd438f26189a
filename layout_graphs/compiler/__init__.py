from .shape_inference import ShapeInference
from .constant_folding import ConstantFolding

__all__ = ["ShapeInference", "ConstantFolding"]
