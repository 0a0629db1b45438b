from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _version

from intcast.convert import (
    ConversionPlan,
    ConversionStrategy,
    checked_convert,
    plan_conversion,
    verify_range_ordering,
)
from intcast.matrix import ConversionMatrix
from intcast.types import ISIZE, SINT, UINT, USIZE, IntegerT, get_integer_types, get_kind
from intcast.value import CheckedIntCast, IntValue

__version__: str
try:
    __version__ = _version(__name__)
except PackageNotFoundError:
    from intcast.version import version

    __version__ = version
