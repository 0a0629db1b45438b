"""
Checked conversions between integer kinds.

Every (source, destination) pair of kinds is classified once into a
`ConversionStrategy`, and the bound checks that pair needs are collected into
a `ConversionPlan`. Applying a plan to a value either returns the same
integer (it is representable in the destination) or None. Conversions never
raise for a value inside its source kind.

The only subtle part is deciding whether a bound check is needed at all. The
destination bound has to be re-expressed in the source kind before it can be
compared to the value, and that is only valid when the source range is
strictly larger than the destination range. Conveniently, these are also the
only cases where the check is necessary. Which of two ranges is larger is
decided by comparing the two maxima as floats; the float is not precise, but
it orders the maxima correctly, which `verify_range_ordering` checks for any
set of kinds before they are used together.
"""

import enum
import itertools
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from intcast.exceptions import ConversionPanic, RangeOrderingError
from intcast.types import IntegerT, get_kind

KindLike = Union[IntegerT, str]


class ConversionStrategy(enum.Enum):
    SIGNED_TO_UNSIGNED = enum.auto()
    SIGNED_TO_SIGNED = enum.auto()
    UNSIGNED_TO_ANY = enum.auto()

    @classmethod
    def for_pair(cls, i_typ: IntegerT, o_typ: IntegerT) -> "ConversionStrategy":
        if not i_typ.is_signed:
            return cls.UNSIGNED_TO_ANY
        if o_typ.is_signed:
            return cls.SIGNED_TO_SIGNED
        return cls.SIGNED_TO_UNSIGNED


def range_exceeds(i_typ: IntegerT, o_typ: IntegerT) -> bool:
    """
    Is the range of `i_typ` strictly larger than the range of `o_typ`?

    The maxima are compared as floats. Only the ordering matters here, not the
    exact values; see `verify_range_ordering`.
    """
    return float(i_typ.max_value) > float(o_typ.max_value)


def verify_range_ordering(kinds: Iterable[IntegerT]) -> None:
    """
    Check that comparing maxima as floats orders every pair of `kinds` the
    same way as comparing them exactly. Raises RangeOrderingError otherwise.

    For maxima of the form 2**k - 1 this holds as long as k <= 1023: two
    such maxima that differ always land on different floats.
    """
    kinds = list(kinds)
    for a, b in itertools.product(kinds, repeat=2):
        exact = a.max_value > b.max_value
        if range_exceeds(a, b) != exact:
            raise RangeOrderingError(
                f"Float comparison of the maxima of {a} and {b} disagrees with the exact ordering",
                a,
                b,
            )


def _rebound(bound: int, i_typ: IntegerT, o_typ: IntegerT) -> int:
    # re-express a bound of o_typ in i_typ. this is only sound when the bound
    # is representable in i_typ, otherwise the comparison would be against a
    # truncated bound.
    if not i_typ.contains_value(bound):
        raise ConversionPanic(f"bound {bound} of {o_typ} is not representable in {i_typ}")
    return bound


@dataclass(frozen=True)
class ConversionPlan:
    """
    The checks needed to convert a value of `i_typ` to `o_typ`.

    Attributes
    ----------
    i_typ : IntegerT
        Source kind
    o_typ : IntegerT
        Destination kind
    strategy : ConversionStrategy
        Range comparison strategy for the signedness combination
    check_negative : bool
        Reject values below zero (signed source, unsigned destination)
    upper : int, optional
        Maximum of `o_typ` expressed in `i_typ`, if values must be compared to it
    lower : int, optional
        Minimum of `o_typ` expressed in `i_typ`, if values must be compared to it
    """

    i_typ: IntegerT
    o_typ: IntegerT
    strategy: ConversionStrategy
    check_negative: bool = False
    upper: Optional[int] = None
    lower: Optional[int] = None

    @property
    def check_upper(self) -> bool:
        return self.upper is not None

    @property
    def check_lower(self) -> bool:
        return self.lower is not None

    @property
    def is_lossless(self) -> bool:
        # no check at all: every value of i_typ fits in o_typ
        return not (self.check_negative or self.check_upper or self.check_lower)

    def apply(self, value: int) -> Optional[int]:
        if self.check_negative and value < 0:
            return None
        if self.upper is not None and value > self.upper:
            return None
        if self.lower is not None and value < self.lower:
            return None
        return value


def plan_conversion(i_typ: IntegerT, o_typ: IntegerT) -> ConversionPlan:
    strategy = ConversionStrategy.for_pair(i_typ, o_typ)
    out_lo, out_hi = o_typ.int_bounds

    check_negative = strategy is ConversionStrategy.SIGNED_TO_UNSIGNED
    upper = lower = None

    if range_exceeds(i_typ, o_typ):
        upper = _rebound(out_hi, i_typ, o_typ)
        if strategy is ConversionStrategy.SIGNED_TO_SIGNED:
            lower = _rebound(out_lo, i_typ, o_typ)

    return ConversionPlan(
        i_typ=i_typ,
        o_typ=o_typ,
        strategy=strategy,
        check_negative=check_negative,
        upper=upper,
        lower=lower,
    )


def checked_convert(i_typ: KindLike, o_typ: KindLike, value: int) -> Optional[int]:
    """
    Convert `value` of kind `i_typ` to kind `o_typ`.

    Returns the same integer if it is representable in `o_typ`, otherwise
    None. Kinds may be given by name ("u32", "isize", ...); pointer-sized
    names resolve against the configured pointer width.

    Raises InvalidLiteral or OverflowException if `value` is not a value of
    `i_typ` in the first place.
    """
    i_typ = get_kind(i_typ)
    o_typ = get_kind(o_typ)
    i_typ.validate_value(value)
    return plan_conversion(i_typ, o_typ).apply(value)
