"""
Format codes and the permutations between them.

A format code is a 4-symbol string naming the role of each axis of a rank-4
tensor, e.g. "NHWC" (batch, height, width, channel). Two codes built from the
same symbols define a Permutation, stored both ways round:

    dst_index[i] -> position in dst of src[i]   (axis index remapping)
    src_index[j] -> position in src of dst[j]   (row reordering)
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Tuple

FORMAT_RANK = 4


class LayoutError(ValueError):
    """Base class for format and layout validation failures."""


class InvalidFormatError(LayoutError):
    """A format code is not exactly 4 distinct symbols."""


class NotAPermutationError(LayoutError):
    """Two format codes do not share the same symbol set."""


class InvalidShapeError(LayoutError):
    """A layout vector is not of shape (4,) or (4, 2)."""


def _check_format(code: str, role: str, attr: str) -> str:
    if not isinstance(code, str):
        raise InvalidFormatError(
            f"{role} format must be a string, received {attr} = {code!r}"
        )
    if len(code) != FORMAT_RANK:
        raise InvalidFormatError(
            f"{role} format must be of length {FORMAT_RANK}, received {attr} = {code}"
        )
    if len(set(code)) != FORMAT_RANK:
        raise InvalidFormatError(
            f"{role} format must not repeat symbols, received {attr} = {code}"
        )
    return code


def _positions(code: str) -> Dict[str, int]:
    return {symbol: pos for pos, symbol in enumerate(code)}


@dataclass(frozen=True)
class Permutation:
    src: str
    dst: str
    dst_index: Tuple[int, ...]
    src_index: Tuple[int, ...]

    @property
    def is_identity(self) -> bool:
        return self.dst_index == tuple(range(FORMAT_RANK))

    def inverse(self) -> "Permutation":
        return Permutation(self.dst, self.src, self.src_index, self.dst_index)

    def __repr__(self):
        return f"Permutation({self.src} -> {self.dst}: {list(self.dst_index)})"


@lru_cache(maxsize=None)
def resolve(src: str, dst: str) -> Permutation:
    """
    Computes the Permutation relating two format codes.

    Raises InvalidFormatError if either code is not 4 distinct symbols and
    NotAPermutationError if the codes are built from different symbols.
    """
    _check_format(src, "Source", "src_format")
    _check_format(dst, "Destination", "dst_format")

    src_pos = _positions(src)
    dst_pos = _positions(dst)
    if src_pos.keys() != dst_pos.keys():
        raise NotAPermutationError(f"{src} is not a permutation of {dst}")

    return Permutation(
        src=src,
        dst=dst,
        dst_index=tuple(dst_pos[symbol] for symbol in src),
        src_index=tuple(src_pos[symbol] for symbol in dst),
    )
