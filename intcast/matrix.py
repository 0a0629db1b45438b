import itertools
from typing import Callable, Dict, Iterator, Optional, Tuple

from intcast.convert import ConversionPlan, KindLike, plan_conversion, verify_range_ordering
from intcast.exceptions import UnknownType
from intcast.settings import get_pointer_bits, validate_pointer_bits
from intcast.types import IntegerT, get_integer_types

ConvertFn = Callable[[int], Optional[int]]


def _convert_fn(plan: ConversionPlan) -> ConvertFn:
    def convert(value: int) -> Optional[int]:
        plan.i_typ.validate_value(value)
        return plan.apply(value)

    convert.__name__ = f"as_{plan.o_typ}_checked"
    convert.__qualname__ = f"{plan.i_typ}.{convert.__name__}"
    return convert


class ConversionMatrix:
    """
    Dispatch table of checked conversions between the ten integer kinds for
    one target pointer width.

    Parameters
    ----------
    pointer_bits : int, optional
        Width isize/usize resolve to. Defaults to the configured pointer
        width (see `intcast.settings.get_pointer_bits`).
    """

    def __init__(self, pointer_bits: Optional[int] = None):
        if pointer_bits is None:
            pointer_bits = get_pointer_bits()
        self.pointer_bits = validate_pointer_bits(pointer_bits)

        self._kinds: Dict[str, IntegerT] = get_integer_types(self.pointer_bits)
        verify_range_ordering(self._kinds.values())

        self._plans: Dict[Tuple[str, str], ConversionPlan] = {}
        self._table: Dict[Tuple[str, str], ConvertFn] = {}
        for i_typ, o_typ in itertools.product(self._kinds.values(), repeat=2):
            plan = plan_conversion(i_typ, o_typ)
            self._plans[(i_typ.name, o_typ.name)] = plan
            self._table[(i_typ.name, o_typ.name)] = _convert_fn(plan)

    def __repr__(self):
        return f"ConversionMatrix(pointer_bits={self.pointer_bits})"

    def __len__(self):
        return len(self._table)

    def __contains__(self, pair):
        try:
            self._key(*pair)
        except (TypeError, ValueError, UnknownType):
            return False
        return True

    def __iter__(self) -> Iterator[Tuple[IntegerT, IntegerT]]:
        return self.pairs()

    @property
    def kinds(self) -> Tuple[IntegerT, ...]:
        return tuple(self._kinds.values())

    def kind(self, name: KindLike) -> IntegerT:
        if isinstance(name, IntegerT):
            if self._kinds.get(name.name) != name:
                raise UnknownType(f"{name} ({name.bits} bits) is not a kind of {self}")
            return name
        if name not in self._kinds:
            raise UnknownType(
                f"No integer kind named '{name}'", hint=f"expected one of {tuple(self._kinds)}"
            )
        return self._kinds[name]

    def _key(self, i_typ: KindLike, o_typ: KindLike) -> Tuple[str, str]:
        return self.kind(i_typ).name, self.kind(o_typ).name

    def pairs(self) -> Iterator[Tuple[IntegerT, IntegerT]]:
        for i_name, o_name in self._table:
            yield self._kinds[i_name], self._kinds[o_name]

    def plan(self, i_typ: KindLike, o_typ: KindLike) -> ConversionPlan:
        return self._plans[self._key(i_typ, o_typ)]

    def lookup(self, i_typ: KindLike, o_typ: KindLike) -> ConvertFn:
        """
        Return the single-argument conversion function for a pair of kinds.
        """
        return self._table[self._key(i_typ, o_typ)]

    def convert(self, i_typ: KindLike, o_typ: KindLike, value: int) -> Optional[int]:
        return self.lookup(i_typ, o_typ)(value)

