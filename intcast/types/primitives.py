# integer kinds: fixed-width and pointer-sized, signed and unsigned

from typing import Optional, Tuple

from intcast.exceptions import InvalidLiteral, OverflowException, UnknownType
from intcast.settings import get_pointer_bits, validate_pointer_bits
from intcast.utils import FIXED_WIDTHS, int_bounds


class IntegerT:
    """
    Integer kind descriptor. All signed and unsigned ints from i8 thru u64,
    plus the pointer-sized isize and usize.

    Attributes
    ----------
    is_signed : bool
        Is the value signed?
    bits : int
        Number of bits the value occupies. For pointer-sized kinds this is the
        target pointer width the kind was resolved against.
    pointer_sized : bool
        Is this isize/usize? A pointer-sized kind is distinct from the
        fixed-width kind of the same width.
    """

    _equality_attrs = ("is_signed", "bits", "pointer_sized")

    __slots__ = ("is_signed", "bits", "pointer_sized")

    def __init__(self, is_signed: bool, bits: int, pointer_sized: bool = False):
        if pointer_sized:
            validate_pointer_bits(bits)
        elif isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0 or bits % 8 != 0:
            raise UnknownType(f"Invalid integer width: {bits!r}")

        object.__setattr__(self, "is_signed", bool(is_signed))
        object.__setattr__(self, "bits", bits)
        object.__setattr__(self, "pointer_sized", bool(pointer_sized))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # copy, deepcopy and pickle rebuild through the constructor
    def __reduce__(self):
        return (IntegerT, (self.is_signed, self.bits, self.pointer_sized))

    def _get_equality_attrs(self):
        return tuple(getattr(self, attr) for attr in self._equality_attrs)

    def __hash__(self):
        return hash(self._get_equality_attrs())

    def __eq__(self, other):
        if self is other:
            return True
        return (
            type(self) is type(other) and self._get_equality_attrs() == other._get_equality_attrs()
        )

    def __lt__(self, other):
        if not isinstance(other, IntegerT):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def _sort_key(self):
        return (self.pointer_sized, not self.is_signed, self.bits)

    def __repr__(self):
        return self._id

    @property
    def _id(self) -> str:
        prefix = "i" if self.is_signed else "u"
        if self.pointer_sized:
            return f"{prefix}size"
        return f"{prefix}{self.bits}"

    # the name a kind is looked up by, e.g. "u32" or "isize"
    @property
    def name(self) -> str:
        return self._id

    @property
    def int_bounds(self) -> Tuple[int, int]:
        return int_bounds(signed=self.is_signed, bits=self.bits)

    @property
    def min_value(self) -> int:
        return self.int_bounds[0]

    @property
    def max_value(self) -> int:
        return self.int_bounds[1]

    def contains_value(self, value: int) -> bool:
        lo, hi = self.int_bounds
        return lo <= value <= hi

    def contains_range(self, other: "IntegerT") -> bool:
        """
        Check whether every value of `other` is representable in this kind.
        """
        lo, hi = self.int_bounds
        other_lo, other_hi = other.int_bounds
        return lo <= other_lo and other_hi <= hi

    def validate_value(self, value) -> None:
        # bool is an int subclass, but it is not an integer of any kind
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidLiteral(f"Invalid literal for type '{self}'", value)
        lower, upper = self.int_bounds
        if value < lower:
            raise OverflowException(f"Value is below lower bound for given type ({lower})", value)
        if value > upper:
            raise OverflowException(f"Value exceeds upper bound for given type ({upper})", value)

    @classmethod
    def fixed_signeds(cls) -> Tuple["IntegerT", ...]:
        return tuple(cls(is_signed=True, bits=b) for b in FIXED_WIDTHS)

    @classmethod
    def fixed_unsigneds(cls) -> Tuple["IntegerT", ...]:
        return tuple(cls(is_signed=False, bits=b) for b in FIXED_WIDTHS)

    @classmethod
    def signeds(cls, pointer_bits: Optional[int] = None) -> Tuple["IntegerT", ...]:
        return cls.fixed_signeds() + (ISIZE(pointer_bits),)

    @classmethod
    def unsigneds(cls, pointer_bits: Optional[int] = None) -> Tuple["IntegerT", ...]:
        return cls.fixed_unsigneds() + (USIZE(pointer_bits),)

    @classmethod
    def all(cls, pointer_bits: Optional[int] = None) -> Tuple["IntegerT", ...]:
        return cls.signeds(pointer_bits) + cls.unsigneds(pointer_bits)


# helper function for readability.
# returns a u<N> type.
def UINT(bits):
    return IntegerT(False, bits)


# helper function for readability.
# returns an i<N> type.
def SINT(bits):
    return IntegerT(True, bits)


# isize resolved against the given pointer width, or the configured one.
def ISIZE(pointer_bits=None):
    if pointer_bits is None:
        pointer_bits = get_pointer_bits()
    return IntegerT(True, pointer_bits, pointer_sized=True)


# usize resolved against the given pointer width, or the configured one.
def USIZE(pointer_bits=None):
    if pointer_bits is None:
        pointer_bits = get_pointer_bits()
    return IntegerT(False, pointer_bits, pointer_sized=True)
