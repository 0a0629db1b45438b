from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from intcast.convert import KindLike, plan_conversion
from intcast.settings import get_pointer_bits
from intcast.types import KIND_NAMES, IntegerT, get_kind


@runtime_checkable
class CheckedIntCast(Protocol):
    """
    Values which can be cast to each of the ten integer kinds. If the
    conversion overflows or underflows, the methods return None.
    """

    def as_isize_checked(self) -> Optional["IntValue"]: ...

    def as_i8_checked(self) -> Optional["IntValue"]: ...

    def as_i16_checked(self) -> Optional["IntValue"]: ...

    def as_i32_checked(self) -> Optional["IntValue"]: ...

    def as_i64_checked(self) -> Optional["IntValue"]: ...

    def as_usize_checked(self) -> Optional["IntValue"]: ...

    def as_u8_checked(self) -> Optional["IntValue"]: ...

    def as_u16_checked(self) -> Optional["IntValue"]: ...

    def as_u32_checked(self) -> Optional["IntValue"]: ...

    def as_u64_checked(self) -> Optional["IntValue"]: ...


@dataclass(frozen=True)
class IntValue:
    """
    An integer together with the kind it is a value of.

    Examples
    --------
    >>> IntValue.u8(127).as_i8_checked()
    IntValue(value=127, typ=i8)
    >>> IntValue.u8(255).as_i8_checked() is None
    True
    >>> IntValue.i8(-1).as_u32_checked() is None
    True
    """

    value: int
    typ: IntegerT

    def __post_init__(self):
        self.typ.validate_value(self.value)

    @classmethod
    def of(cls, value: int, typ: KindLike, pointer_bits: Optional[int] = None) -> "IntValue":
        return cls(value, get_kind(typ, pointer_bits))

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def _pointer_bits(self) -> int:
        # a pointer-sized value keeps the target it was created for
        if self.typ.pointer_sized:
            return self.typ.bits
        return get_pointer_bits()

    def as_checked(self, o_typ: KindLike) -> Optional["IntValue"]:
        if not isinstance(o_typ, IntegerT):
            o_typ = get_kind(o_typ, self._pointer_bits())

        ret = plan_conversion(self.typ, o_typ).apply(self.value)
        if ret is None:
            return None
        return IntValue(ret, o_typ)


def _as_kind_checked(name):
    def as_kind_checked(self) -> Optional[IntValue]:
        return self.as_checked(name)

    as_kind_checked.__name__ = f"as_{name}_checked"
    as_kind_checked.__qualname__ = f"IntValue.{as_kind_checked.__name__}"
    as_kind_checked.__doc__ = f"Convert to {name}, or None if the value is not representable."
    return as_kind_checked


def _kind_ctor(name):
    def ctor(cls, value: int, pointer_bits: Optional[int] = None) -> IntValue:
        return cls.of(value, name, pointer_bits)

    ctor.__name__ = name
    ctor.__qualname__ = f"IntValue.{name}"
    ctor.__doc__ = f"Create a value of kind {name}."
    return classmethod(ctor)


# IntValue.as_i8_checked(), ..., IntValue.usize(...)
for _name in KIND_NAMES:
    setattr(IntValue, f"as_{_name}_checked", _as_kind_checked(_name))
    setattr(IntValue, _name, _kind_ctor(_name))
