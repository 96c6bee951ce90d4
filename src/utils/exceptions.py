from src.utils.constants import MAX_MENU_OPTION, MIN_MENU_OPTION


class InvalidOptionError(Exception):
    """Raised when a menu option falls outside the allowed range."""

    def __init__(self, option: int):
        self.option = option
        super().__init__(
            f"The option must be between {MIN_MENU_OPTION} and {MAX_MENU_OPTION} inclusive"
        )
