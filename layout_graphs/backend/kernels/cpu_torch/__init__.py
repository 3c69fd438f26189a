from .layout import data_format_dim_map_torch, data_format_vec_permute_torch

__all__ = ["data_format_dim_map_torch", "data_format_vec_permute_torch"]
