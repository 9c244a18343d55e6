"""
Logging configuration for the toml-const-cli entrypoint.

``LogSettings`` captures everything that decides how the process logs.
The CLI builds one from its flags and the environment mapping it hands
over, then calls ``setup_logging(settings)`` once.  Nothing in this
module reads ``os.environ`` or mutates it.

Level precedence:  --debug > --verbose > --quiet > TOML_CONST_LOG_LEVEL > INFO
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_LEVEL = "INFO"

ENV_LEVEL = "TOML_CONST_LOG_LEVEL"
ENV_FILE = "TOML_CONST_LOG_FILE"
ENV_FILE_LEVEL = "TOML_CONST_LOG_FILE_LEVEL"

# Console format per minimum level; the first entry the level reaches wins
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s %(message)s", "%H:%M:%S"),
    (logging.CRITICAL, "%(levelname)s: %(message)s", None),
)

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LogSettings:
    """How the process should log.

    Attributes:
        level: Console level name.
        file: Optional log file path.
        file_level: Level for the log file; defaults to ``level``.
    """

    level: str = DEFAULT_LEVEL
    file: str | None = None
    file_level: str | None = None

    @classmethod
    def from_cli(
        cls,
        env: Mapping[str, str],
        debug: bool = False,
        verbose: bool = False,
        quiet: bool = False,
    ) -> LogSettings:
        """Resolve settings from CLI flags and an environment mapping."""
        if debug:
            level = "DEBUG"
        elif verbose:
            level = "INFO"
        elif quiet:
            level = "ERROR"
        else:
            level = env.get(ENV_LEVEL) or DEFAULT_LEVEL

        return cls(
            level=level,
            file=env.get(ENV_FILE) or None,
            file_level=env.get(ENV_FILE_LEVEL) or None,
        )

    @property
    def numeric_level(self) -> int:
        return parse_level(self.level)


def parse_level(level: str | None) -> int:
    """Level name to its numeric constant; unknown names mean INFO."""
    numeric = logging.getLevelName(level.upper()) if level else None
    return numeric if isinstance(numeric, int) else logging.INFO


def _console_handler(numeric_level: int) -> logging.Handler:
    for threshold, fmt, datefmt in _CONSOLE_FORMATS:
        if numeric_level <= threshold:
            break
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def setup_logging(settings: LogSettings) -> None:
    """Replace the root logger's handlers according to ``settings``."""
    console_level = settings.numeric_level
    handlers = [_console_handler(console_level)]
    root_level = console_level

    if settings.file:
        file_level = parse_level(settings.file_level) if settings.file_level else console_level
        fh = logging.FileHandler(settings.file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        handlers.append(fh)
        root_level = min(root_level, file_level)

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(root_level)

    logging.raiseExceptions = False
