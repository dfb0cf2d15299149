"""
Gobblet Configuration

Centralized settings, paths, and constants for the rules engine.
"""

import logging
import sys
from pathlib import Path
from dataclasses import dataclass
import appdirs


# Application info
APP_NAME = "GobbletEngine"
APP_AUTHOR = "Gobblet"
APP_VERSION = "1.0.0"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Data directory
    data_dir: Path = Path(appdirs.user_data_dir(APP_NAME, APP_AUTHOR))

    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    @property
    def log_file(self) -> Path:
        return self.log_dir / LOG_SETTINGS.file_name

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for dir_path in [self.data_dir, self.log_dir]:
            dir_path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class RuleSettings:
    """Fixed game rules."""
    # Board is always 3x3
    board_size: int = 3

    # Small, Medium, Large
    size_count: int = 3

    # Free units per player per size at the start of a game
    units_per_size: int = 2

    # Cells needed in a line to win
    line_length: int = 3

    player_count: int = 2


@dataclass(frozen=True)
class LogSettings:
    """Logging settings."""
    level: int = logging.INFO
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    file_name: str = "gobblet.log"


# Singleton instances
RULE_SETTINGS = RuleSettings()
LOG_SETTINGS = LogSettings()
PATHS = Paths()


def init_logging(level: int = None, log_file: Path = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level (default: LOG_SETTINGS.level)
        log_file: Optional file to log to in addition to stderr
    """
    root = logging.getLogger()
    root.setLevel(level if level is not None else LOG_SETTINGS.level)

    formatter = logging.Formatter(LOG_SETTINGS.format)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [stream_handler]

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Replace handlers so repeated calls don't duplicate output
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)


def init_config() -> None:
    """Initialize configuration, create required directories and start logging."""
    PATHS.ensure_directories()
    init_logging(log_file=PATHS.log_file)
