import os

from src.utils.constants import MAX_MENU_OPTION, MIN_MENU_OPTION
from src.utils.exceptions import InvalidOptionError
from src.utils.logger import setup_logger


class Menu:
    """Menu with a fixed set of numbered options."""

    def __init__(self):
        self.logger = setup_logger(os.path.basename(__file__))

    def display_menu_option(self, option: int) -> None:
        """
        Print a confirmation for the selected option.
        Raises InvalidOptionError when the option is out of range; nothing is printed then.
        """
        if option < MIN_MENU_OPTION or option > MAX_MENU_OPTION:
            self.logger.debug(f"Rejected menu option {option}")
            raise InvalidOptionError(option)

        print(f"Menu option {option} selected")
        self.logger.info(f"Menu option {option} selected")
