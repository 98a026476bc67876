"""Configures pytest further: slow/extreme test switches and shared LargeInteger helpers."""
import pytest

from largeint import LargeInteger


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extreme key size tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@pytest.fixture
def li():
    """Shorthand for building LargeIntegers from Python ints inside tests."""
    return LargeInteger.from_int


@pytest.fixture
def textbook_key():
    """The p=61, q=53 textbook key: ((e, n), (d, n))."""
    n = LargeInteger.from_int(3233)
    return (LargeInteger.from_int(17), n), (LargeInteger.from_int(2753), n)
