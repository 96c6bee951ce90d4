import pytest

from src.business_logic.array_processor import ArrayProcessor
from src.business_logic.driver import Driver
from src.business_logic.menu import Menu


@pytest.fixture
def sample_array():
    """The array the driver measures by default."""
    return [4, 2, 5, 3, 5, 2, 64, 34, 3434, 3432, 644]


@pytest.fixture
def array_processor():
    return ArrayProcessor()


@pytest.fixture
def menu():
    return Menu()


@pytest.fixture
def driver(array_processor, menu):
    return Driver(array_processor, menu)
