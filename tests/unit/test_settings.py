import warnings

import pytest

from intcast.exceptions import InvalidTarget
from intcast.settings import (
    Settings,
    _pointer_bits_from_env,
    anchor_settings,
    get_global_settings,
    get_pointer_bits,
)
from intcast.utils import POINTER_WIDTHS, host_pointer_bits
from intcast.warnings import (
    IntcastWarning,
    PointerWidthOverride,
    intcast_warn,
    warnings_filter,
)

OTHER_WIDTH = next(w for w in POINTER_WIDTHS if w != host_pointer_bits())


def test_env_unset():
    assert _pointer_bits_from_env({}) is None
    assert _pointer_bits_from_env({"INTCAST_POINTER_BITS": ""}) is None


def test_env_host_width_does_not_warn():
    host = host_pointer_bits()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert _pointer_bits_from_env({"INTCAST_POINTER_BITS": str(host)}) == host


def test_env_override_warns():
    with pytest.warns(PointerWidthOverride, match="overrides the host pointer width"):
        bits = _pointer_bits_from_env({"INTCAST_POINTER_BITS": str(OTHER_WIDTH)})
    assert bits == OTHER_WIDTH


@pytest.mark.parametrize("val", ["8", "128", "sixty-four", "64.0"])
def test_env_invalid(val):
    with pytest.raises(InvalidTarget):
        _pointer_bits_from_env({"INTCAST_POINTER_BITS": val})


@pytest.mark.parametrize("bits", [8, 0, True, "32"])
def test_settings_validate(bits):
    with pytest.raises(InvalidTarget):
        Settings(pointer_bits=bits)


def test_anchor_settings_restores(global_settings):
    assert get_global_settings() is global_settings
    with anchor_settings(Settings(pointer_bits=OTHER_WIDTH)):
        assert get_pointer_bits() == OTHER_WIDTH
    assert get_global_settings() is global_settings


def test_anchor_settings_restores_on_error(global_settings):
    with pytest.raises(RuntimeError):
        with anchor_settings(Settings(pointer_bits=16)):
            raise RuntimeError
    assert get_global_settings() is global_settings


def test_unset_pointer_bits_fall_back():
    assert Settings().get_pointer_bits() in POINTER_WIDTHS
    assert Settings(pointer_bits=32).get_pointer_bits() == 32


def test_as_dict_roundtrip():
    assert Settings().as_dict() == {}
    assert Settings(pointer_bits=16).as_dict() == {"pointer_bits": 16}
    assert Settings.from_dict({"pointer_bits": 32}) == Settings(pointer_bits=32)


def test_warnings_filter():
    with warnings_filter("error"):
        with pytest.raises(IntcastWarning, match="careful"):
            intcast_warn("careful")

    with warnings_filter("none"):
        with warnings.catch_warnings(record=True) as w:
            intcast_warn("careful")
        assert w == []
