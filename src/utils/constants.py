import json
from pathlib import Path

config_path = Path(__file__).resolve().parent.parent.parent / "config.json"

config_data = {}
if config_path.is_file():
    with open(config_path, "r", encoding="utf-8") as f:
        config_data = json.load(f)


MIN_MENU_OPTION = 1
MAX_MENU_OPTION = 3
SAMPLE_ARRAY = (4, 2, 5, 3, 5, 2, 64, 34, 3434, 3432, 644)
MENU_OPTIONS = (1, 2, 3, 4)

LOG_LEVEL = config_data.get("LOG_LEVEL", "WARNING")
LOG_TO_CONSOLE = bool(config_data.get("LOG_TO_CONSOLE", False))
LOG_TO_FILE = bool(config_data.get("LOG_TO_FILE", False))
LOG_DIR = config_data.get("LOG_DIR", "logs")
