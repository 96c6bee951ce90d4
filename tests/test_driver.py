from src.business_logic.array_processor import ArrayProcessor
from src.business_logic.driver import Driver
from src.business_logic.menu import Menu
from tests.test_utils import captured_lines

EXPECTED_ERROR = "Menu option invalid: The option must be between 1 and 3 inclusive"


def test_default_run(driver, capsys):
    """Test the full default scenario."""
    driver.run()
    captured = capsys.readouterr()

    assert captured_lines(captured.out) == [
        "Array length is 11",
        "Menu option 1 selected",
        "Menu option 2 selected",
        "Menu option 3 selected",
    ]
    assert captured_lines(captured.err) == [EXPECTED_ERROR]


def test_first_failure_aborts_remaining_options(driver, capsys):
    """Test that options after the first invalid one are never displayed."""
    driver.run(array=[1, 2], options=[1, 5, 2, 3])
    captured = capsys.readouterr()

    assert captured_lines(captured.out) == ["Array length is 2", "Menu option 1 selected"]
    assert captured_lines(captured.err) == [EXPECTED_ERROR]


def test_all_valid_options(driver, capsys):
    driver.run(array=[], options=[3, 2, 1])
    captured = capsys.readouterr()

    assert captured_lines(captured.out) == [
        "Array length is 0",
        "Menu option 3 selected",
        "Menu option 2 selected",
        "Menu option 1 selected",
    ]
    assert captured.err == ""


def test_invalid_first_option(driver, capsys):
    driver.run(array=[9], options=[0, 1])
    captured = capsys.readouterr()

    assert captured_lines(captured.out) == ["Array length is 1"]
    assert captured_lines(captured.err) == [EXPECTED_ERROR]


def test_driver_builds_default_collaborators():
    driver = Driver()
    assert isinstance(driver.array_processor, ArrayProcessor)
    assert isinstance(driver.menu, Menu)
