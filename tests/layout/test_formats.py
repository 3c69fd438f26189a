import itertools
import pytest
from layout_graphs.ops.layout import (
    resolve,
    Permutation,
    LayoutError,
    InvalidFormatError,
    NotAPermutationError,
)

ALL_FORMATS = ["".join(p) for p in itertools.permutations("NHWC")]


def test_resolve_nhwc_to_nchw():
    perm = resolve("NHWC", "NCHW")
    assert perm.dst_index == (0, 2, 3, 1)
    assert perm.src_index == (0, 3, 1, 2)
    assert perm.src == "NHWC"
    assert perm.dst == "NCHW"


@pytest.mark.parametrize("fmt", ALL_FORMATS)
def test_resolve_same_format_is_identity(fmt):
    perm = resolve(fmt, fmt)
    assert perm.is_identity
    assert perm.dst_index == (0, 1, 2, 3)
    assert perm.src_index == (0, 1, 2, 3)


def test_forward_and_backward_maps_are_inverse():
    for src, dst in itertools.product(ALL_FORMATS, repeat=2):
        forward = resolve(src, dst)
        backward = resolve(dst, src)
        for i in range(4):
            assert backward.dst_index[forward.dst_index[i]] == i
            assert forward.src_index[forward.dst_index[i]] == i
        assert forward.inverse() == backward


def test_resolve_is_cached():
    assert resolve("NCHW", "NHWC") is resolve("NCHW", "NHWC")


def test_permutation_is_immutable():
    perm = resolve("NHWC", "NCHW")
    with pytest.raises(AttributeError):
        perm.dst_index = (0, 1, 2, 3)


def test_non_identity_permutation():
    assert not resolve("NHWC", "NCHW").is_identity
    assert isinstance(resolve("NHWC", "NCHW"), Permutation)


@pytest.mark.parametrize(
    "src, dst, match",
    [
        ("NHW", "NHWC", "src_format = NHW"),
        ("NHWC", "NCH", "dst_format = NCH"),
        ("NHWCD", "NHWC", "src_format = NHWCD"),
        ("", "NHWC", "Source format must be of length 4"),
    ],
)
def test_wrong_length_rejected(src, dst, match):
    with pytest.raises(InvalidFormatError, match=match):
        resolve(src, dst)


def test_duplicate_symbols_rejected():
    with pytest.raises(InvalidFormatError, match="repeat"):
        resolve("NHHC", "NHWC")
    with pytest.raises(InvalidFormatError, match="dst_format = NHWW"):
        resolve("NHWC", "NHWW")


def test_symbol_mismatch_rejected():
    with pytest.raises(NotAPermutationError, match="NHWC is not a permutation of NHWD"):
        resolve("NHWC", "NHWD")


def test_errors_share_a_base():
    assert issubclass(InvalidFormatError, LayoutError)
    assert issubclass(NotAPermutationError, LayoutError)
    assert issubclass(LayoutError, ValueError)
