"""
Logging for scenecam.

Every fallback or degenerate-geometry event in the camera is a WARNING on
the ``scenecam.rendering.camera`` logger. This module wires those records
to a console / file and lets a viewer collect them for display:

    with capture_diagnostics() as events:
        camera.set_view_angle(slider_value)
    if events:
        status_bar.show(events[-1].message)
"""

import logging
import sys
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Deque, Iterator, List, Optional

ROOT_LOGGER = "scenecam"
CAMERA_LOGGER = f"{ROOT_LOGGER}.rendering.camera"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level and logger name."""

    RESET = "\033[0m"
    NAME_COLOR = "\033[96m"
    LEVEL_COLORS = {
        logging.DEBUG: "\033[90m",
        logging.INFO: "\033[92m",
        logging.WARNING: "\033[93m",
        logging.ERROR: "\033[91m",
        logging.CRITICAL: "\033[1m\033[91m",
    }

    def __init__(self, fmt: str = LOG_FORMAT, datefmt: str = DATE_FORMAT, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record):
        if not self.use_colors:
            return super().format(record)
        # Colour a copy so other handlers see the plain record
        record = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        record.name = f"{self.NAME_COLOR}{record.name}{self.RESET}"
        return super().format(record)


@dataclass(frozen=True)
class DiagnosticEvent:
    """One camera warning: which logger raised it and the text."""
    logger: str
    message: str
    level: int = logging.WARNING


class DiagnosticsHandler(logging.Handler):
    """Keeps the most recent camera warnings in memory."""

    def __init__(self, capacity: int = 100, level: int = logging.WARNING):
        super().__init__(level)
        self.events: Deque[DiagnosticEvent] = deque(maxlen=capacity)

    def emit(self, record):
        self.events.append(DiagnosticEvent(record.name, record.getMessage(), record.levelno))

    def clear(self):
        self.events.clear()


_installed: List[logging.Handler] = []


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True,
    use_colors: bool = True,
):
    """
    (Re)configure the ``scenecam`` logger.

    Handlers installed by an earlier call are removed first.

    Args:
        level: Minimum level for the console
        log_file: Optional file that receives everything from DEBUG up
        console: Write to stderr
        use_colors: ANSI colours on the console
    """
    root = logging.getLogger(ROOT_LOGGER)
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(ColoredFormatter(use_colors=use_colors))
        _installed.append(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        _installed.append(file_handler)

    for handler in _installed:
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if log_file else level)


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``scenecam`` hierarchy."""
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def get_camera_logger() -> logging.Logger:
    return logging.getLogger(CAMERA_LOGGER)


@contextmanager
def capture_diagnostics(capacity: int = 100) -> Iterator[Deque[DiagnosticEvent]]:
    """
    Collect camera warnings raised inside the block.

    The camera never reports a fallback through return values; this is how
    a caller finds out that a requested value was not applied.
    """
    handler = DiagnosticsHandler(capacity)
    camera_logger = get_camera_logger()
    previous_level = camera_logger.level
    if camera_logger.getEffectiveLevel() > logging.WARNING:
        camera_logger.setLevel(logging.WARNING)
    camera_logger.addHandler(handler)
    try:
        yield handler.events
    finally:
        camera_logger.removeHandler(handler)
        camera_logger.setLevel(previous_level)
        handler.close()
