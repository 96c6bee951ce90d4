"""Runs the array length query and the menu option checks in sequence."""
import os
import sys
from typing import Iterable, Optional, Sequence

from src.business_logic.array_processor import ArrayProcessor
from src.business_logic.menu import Menu
from src.utils.constants import MENU_OPTIONS, SAMPLE_ARRAY
from src.utils.exceptions import InvalidOptionError
from src.utils.logger import setup_logger


class Driver:
    """Orchestrates ArrayProcessor and Menu and reports invalid options."""

    def __init__(self, array_processor: Optional[ArrayProcessor] = None, menu: Optional[Menu] = None):
        self.array_processor = array_processor or ArrayProcessor()
        self.menu = menu or Menu()
        self.logger = setup_logger(os.path.basename(__file__))

    def run(self, array: Sequence[int] = SAMPLE_ARRAY, options: Iterable[int] = MENU_OPTIONS) -> None:
        """
        Print the array length, then display each option in order.
        The first invalid option stops the remaining ones and is reported on stderr.
        """
        length = self.array_processor.get_array_length(array)
        print(f"Array length is {length}")

        try:
            for option in options:
                self.menu.display_menu_option(option)
        except InvalidOptionError as e:
            self.logger.info(f"Stopped at option {e.option}: {e}")
            print(f"Menu option invalid: {e}", file=sys.stderr)
