from .cast import cast_wrappers
from .copy_to import copy_to_numpy
from .mod import mod_generic_tensor
from .gather import gather_axis0
from .layout import data_format_dim_map, data_format_vec_permute

__all__ = [
    "cast_wrappers",
    "copy_to_numpy",
    "mod_generic_tensor",
    "gather_axis0",
    "data_format_dim_map",
    "data_format_vec_permute",
]
