import dataclasses

import pytest

from fnv1a.core.errors import InvalidConfiguration
from fnv1a.core.params import CANONICAL, SUPPORTED_WIDTHS, FnvParams, params_for


def test_canonical_32_and_64():
    assert params_for(32) == FnvParams(32, 0x01000193, 0x811C9DC5)
    assert params_for(64) == FnvParams(64, 0x100000001B3, 0xCBF29CE484222325)


def test_canonical_constants_fit_their_width():
    for width in SUPPORTED_WIDTHS:
        prime, offset = CANONICAL[width]
        assert 0 < prime < 1 << width
        assert 0 < offset < 1 << width


def test_overrides_keep_the_other_default():
    params = params_for(32, prime=31)
    assert params.prime == 31
    assert params.offset_basis == 0x811C9DC5


def test_derived_sizes():
    params = params_for(256)
    assert params.digest_size == 32
    assert params.mask == (1 << 256) - 1


def test_params_are_frozen():
    params = params_for(32)
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.offset_basis = 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 16},
        {"width": 32, "offset_basis": 0},
        {"width": 32, "prime": 1 << 32},
        {"width": 32, "prime": True},
        {"width": 32, "offset_basis": "1"},
    ],
)
def test_invalid_params(kwargs):
    with pytest.raises(InvalidConfiguration):
        params_for(**kwargs)
