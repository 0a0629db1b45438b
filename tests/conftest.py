import hypothesis
import pytest

from intcast.matrix import ConversionMatrix
from intcast.settings import Settings, anchor_settings
from intcast.utils import POINTER_WIDTHS, host_pointer_bits

############
# PATCHING #
############


# disable hypothesis deadline globally
hypothesis.settings.register_profile("ci", deadline=None)
hypothesis.settings.load_profile("ci")


def pytest_addoption(parser):
    parser.addoption(
        "--pointer-bits",
        choices=[str(w) for w in POINTER_WIDTHS],
        default=None,
        help="pointer width isize/usize resolve to (default: host)",
    )


@pytest.fixture(scope="session")
def pointer_bits(pytestconfig):
    flag = pytestconfig.getoption("pointer_bits")
    if flag is None:
        return host_pointer_bits()
    return int(flag)


@pytest.fixture(scope="session", autouse=True)
def global_settings(pointer_bits):
    settings = Settings(pointer_bits=pointer_bits)
    with anchor_settings(settings):
        yield settings


@pytest.fixture(scope="session")
def matrix(pointer_bits):
    return ConversionMatrix(pointer_bits)


@pytest.fixture(params=POINTER_WIDTHS, ids=lambda w: f"ptr{w}")
def any_pointer_bits(request):
    return request.param
