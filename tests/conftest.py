import pytest

from translit import TransliterationEngine


@pytest.fixture(scope="session")
def engine():
    return TransliterationEngine()


@pytest.fixture
def fixed_clock():
    return lambda: 1700000000.0
