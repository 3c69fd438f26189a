from .cast import cast_ref
from .copy_to import copy_to_ref, to_numpy_backend
from .gather import gather_ref
from .mod import mod_ref

__all__ = ["cast_ref", "copy_to_ref", "to_numpy_backend", "gather_ref", "mod_ref"]
