from typing import Dict, Optional

from intcast.exceptions import UnknownType

from .primitives import ISIZE, SINT, UINT, USIZE, IntegerT

# names of the ten kinds, in the order the conversion surface lists them
KIND_NAMES = ("isize", "i8", "i16", "i32", "i64", "usize", "u8", "u16", "u32", "u64")


def get_integer_types(pointer_bits: Optional[int] = None) -> Dict[str, IntegerT]:
    """
    Return the ten integer kinds keyed by name, with isize/usize resolved
    against `pointer_bits` (or the configured pointer width).
    """
    result = {}
    for typ in IntegerT.all(pointer_bits):
        result[typ.name] = typ
    return {name: result[name] for name in KIND_NAMES}


def get_kind(name: str, pointer_bits: Optional[int] = None) -> IntegerT:
    if isinstance(name, IntegerT):
        return name

    if name not in KIND_NAMES:
        raise UnknownType(f"No integer kind named '{name}'", hint=f"expected one of {KIND_NAMES}")

    return get_integer_types(pointer_bits)[name]


__all__ = [
    "KIND_NAMES",
    "IntegerT",
    "ISIZE",
    "SINT",
    "UINT",
    "USIZE",
    "get_integer_types",
    "get_kind",
]
