"""
Derivation paths, e.g. m/44'/0'/0'/0/1
"""
from typing import Iterable
from typing import List
from typing import Union

from xkeys.errors import MalformattedDerivation
from xkeys.primitives import HARDENED_OFFSET
from xkeys.primitives import UINT32_MAX

HARDENED_MARKERS = ("'", "h", "H")


def parse_index(component: str) -> int:
    """
    Parse a single path component

    >>> parse_index("44'")
    2147483692
    >>> parse_index("7")
    7
    """
    hardened = component.endswith(HARDENED_MARKERS)
    digits = component[:-1] if hardened else component
    if not (digits.isascii() and digits.isdigit()):
        raise MalformattedDerivation(f"check path value: {component}")
    index = int(digits)
    if index >= HARDENED_OFFSET:
        raise MalformattedDerivation(f"index out of range: {component}")
    return index + HARDENED_OFFSET if hardened else index


def parse_path(path: str) -> List[int]:
    """
    Parse path in shortened notation to a list of child indices
    Args:
        path: str, e.g. m/0'/1, the leading m (or M) is optional
    Returns:
        list of indices, hardened indices offset by HARDENED_OFFSET

    >>> parse_path("m/0'/1/2h")
    [2147483648, 1, 2147483650]
    """
    components = path.strip().split("/")
    if components[0] in ("m", "M"):
        components = components[1:]
    if components == [""]:
        # e.g. "m/" or ""
        return []
    return [parse_index(component) for component in components]


def format_path(indices: Iterable[int]) -> str:
    """
    >>> format_path([2147483692, 0, 1])
    "m/44'/0/1"
    """
    formatted = ["m"]
    for index in indices:
        if index < 0 or index > UINT32_MAX:
            raise MalformattedDerivation(f"index out of range: {index}")
        if index >= HARDENED_OFFSET:
            formatted.append(f"{index - HARDENED_OFFSET}'")
        else:
            formatted.append(str(index))
    return "/".join(formatted)


def to_indices(path: Union[str, Iterable[int]]) -> List[int]:
    if isinstance(path, str):
        return parse_path(path)
    indices = list(path)
    for index in indices:
        if (
            not isinstance(index, int)
            or isinstance(index, bool)
            or index < 0
            or index > UINT32_MAX
        ):
            raise MalformattedDerivation(f"index out of range: {index}")
    return indices
