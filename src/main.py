"""Console entry point: runs the driver and maps failures to exit codes."""
import os
import sys

from src.business_logic.driver import Driver
from src.utils.logger import setup_logger

logger = setup_logger(os.path.basename(__file__))


def main() -> None:
    """Run the driver once. A caught InvalidOptionError still completes normally."""
    try:
        Driver().run()
    except KeyboardInterrupt:
        logger.warning("Run interrupted")
        print("Interrupted by user. Exiting...", file=sys.stderr)
        sys.exit(0)
    except Exception as e:
        logger.exception("Driver failed")
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
