"""
Test derivation path parsing
"""
import pytest

from xkeys.errors import MalformattedDerivation
from xkeys.path import format_path
from xkeys.path import parse_path
from xkeys.path import to_indices
from xkeys.primitives import HARDENED_OFFSET

H = HARDENED_OFFSET


@pytest.mark.parametrize(
    "path,indices",
    (
        ("m", []),
        ("M", []),
        ("m/0", [0]),
        ("m/0'/1", [H, 1]),
        ("m/44'/0'/0'/0/0", [H + 44, H, H, 0, 0]),
        ("m/84h/1H/0'", [H + 84, H + 1, H]),
        ("0/1/2", [0, 1, 2]),
        ("m/2147483647'", [H + 2147483647]),
    ),
)
def test_parse_path(path: str, indices: list):
    assert parse_path(path) == indices


@pytest.mark.parametrize(
    "path",
    ("m/a", "m//1", "m/1''", "m/-1", "m/2147483648", "m/0x10", "x/0", "m/1/"),
)
def test_parse_path_malformatted(path: str):
    with pytest.raises(MalformattedDerivation):
        parse_path(path)


def test_format_path():
    assert format_path([H + 44, H, H, 0, 1]) == "m/44'/0'/0'/0/1"
    assert format_path([]) == "m"
    assert parse_path(format_path([H + 84, 7])) == [H + 84, 7]


def test_to_indices():
    assert to_indices("m/1") == [1]
    assert to_indices((1, H)) == [1, H]
    with pytest.raises(MalformattedDerivation):
        to_indices([2**32])


@pytest.mark.parametrize("index", (True, False, -1, 1.0, "1"))
def test_to_indices_rejects_non_index(index):
    with pytest.raises(MalformattedDerivation):
        to_indices([index])
