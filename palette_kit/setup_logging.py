import logging
import sys
from pathlib import Path
from typing import Optional, Union


def setup_logging(level: int = logging.INFO, log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Configures the root logger for scripts and tests.
    - One message format for console and file.
    - Console output goes to stdout.
    - log_file, when given, is rewritten on every run.
    """
    handlers: list = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.insert(0, logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,  # drops handlers from earlier calls
    )

    logging.getLogger("palette_kit").setLevel(level)
    logging.getLogger("numba").setLevel(logging.WARNING)
