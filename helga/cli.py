"""Command entry point: load and validate the configuration."""

from __future__ import annotations

from collections.abc import Sequence

from .config import load_config
from .errors import HelgaError, handle_error
from .log import close_log_file, get_logger


def main(argv: Sequence[str] | None = None) -> int:
    """Load the configuration named by HELGA_CONF_FILE_PATH; return the exit status."""
    get_logger().info("loading configuration...")
    try:
        load_config(None)
    except HelgaError as exc:
        handle_error(exc)
        return 1
    finally:
        get_logger().error("closing log file")
        close_log_file()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())