import os
from typing import Sequence

from src.utils.logger import setup_logger


class ArrayProcessor:
    """Queries over in-memory integer arrays."""

    def __init__(self):
        self.logger = setup_logger(os.path.basename(__file__))

    def get_array_length(self, array: Sequence[int]) -> int:
        """Return the number of elements in the array."""
        length = len(array)
        self.logger.debug(f"Array of {length} elements")
        return length
