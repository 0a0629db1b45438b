import contextlib
import dataclasses
import os
from dataclasses import dataclass
from typing import Generator, Mapping, Optional

from intcast.exceptions import InvalidTarget
from intcast.utils import POINTER_WIDTHS, host_pointer_bits
from intcast.warnings import PointerWidthOverride, intcast_warn


def validate_pointer_bits(bits, source="pointer width") -> int:
    if isinstance(bits, bool) or not isinstance(bits, int) or bits not in POINTER_WIDTHS:
        raise InvalidTarget(
            f"Unsupported {source}: {bits!r}",
            hint=f"pointer-sized kinds may be {', '.join(str(w) for w in POINTER_WIDTHS)} bits wide",
        )
    return bits


def _pointer_bits_from_env(environ: Mapping[str, str]) -> Optional[int]:
    val = environ.get("INTCAST_POINTER_BITS")
    if val is None or val == "":
        return None

    try:
        bits = int(val)
    except ValueError:
        raise InvalidTarget(f"INTCAST_POINTER_BITS is not an integer: {val!r}") from None

    validate_pointer_bits(bits, source="INTCAST_POINTER_BITS")

    host = host_pointer_bits()
    if bits != host:
        intcast_warn(
            PointerWidthOverride(
                f"INTCAST_POINTER_BITS={bits} overrides the host pointer width ({host})"
            )
        )
    return bits


INTCAST_POINTER_BITS: Optional[int] = _pointer_bits_from_env(os.environ)


@dataclass
class Settings:
    pointer_bits: Optional[int] = None

    def __post_init__(self):
        # sanity check inputs
        if self.pointer_bits is not None:
            validate_pointer_bits(self.pointer_bits)

    def get_pointer_bits(self) -> int:
        if self.pointer_bits is not None:
            return self.pointer_bits
        if INTCAST_POINTER_BITS is not None:
            return INTCAST_POINTER_BITS
        return host_pointer_bits()

    def as_dict(self):
        ret = dataclasses.asdict(self)
        return {k: v for (k, v) in ret.items() if v is not None}

    @classmethod
    def from_dict(cls, data):
        return cls(**data)


_settings: Optional[Settings] = None


def get_global_settings() -> Optional[Settings]:
    return _settings


def set_global_settings(new_settings: Optional[Settings]) -> None:
    assert isinstance(new_settings, Settings) or new_settings is None

    global _settings
    _settings = new_settings


@contextlib.contextmanager
def anchor_settings(new_settings: Settings) -> Generator:
    """
    Set the globally available settings for the duration of this context manager
    """
    assert new_settings is not None
    tmp = get_global_settings()
    try:
        set_global_settings(new_settings)
        yield
    finally:
        set_global_settings(tmp)


def get_pointer_bits() -> int:
    """
    Resolve the width of isize/usize: global settings, then the
    INTCAST_POINTER_BITS environment variable, then the host.
    """
    settings = get_global_settings() or Settings()
    return settings.get_pointer_bits()
