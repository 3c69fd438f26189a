from .atomic_types import OpType

__all__ = ["OpType"]
