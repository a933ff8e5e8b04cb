import logging
import os
from dataclasses import dataclass

from rich.console import Console
from rich.text import Text
from typing_extensions import override

_console = Console()

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

@dataclass
class LogSettings:
    level: int
    # Append the source location to every record.
    verbose: bool

    @classmethod
    def from_env(cls) -> "LogSettings":
        """Read `LOG_LEVEL` and `VERBOSE_LOGS` from the environment.

        Verbose output is on by default only for the debug level.
        """
        level_str = os.environ.get("LOG_LEVEL", "info")
        try:
            level = LEVELS[level_str.lower()]
        except KeyError:
            level = logging.INFO
            print(
                f"Warning: invalid log level `{level_str}`, expected one of: {', '.join(LEVELS.keys())}, defaulting to INFO"
            )

        match os.environ.get("VERBOSE_LOGS", ""):
            case "":
                verbose = level == logging.DEBUG
            case "0":
                verbose = False
            case _:
                verbose = True

        return cls(level, verbose)

@dataclass(frozen=True)
class LevelStyle:
    """How the records of one log level are rendered."""

    label: str
    label_style: str
    message_style: str

    def render(self, message: str) -> Text:
        text = Text.assemble((self.label, self.label_style), ": ")
        text.append(message, style=self.message_style)
        return text

LOCATION_STYLE = "dim white"

LEVEL_STYLES = {
    logging.DEBUG: LevelStyle("Debug", "dim white", "dim white"),
    logging.INFO: LevelStyle("Info", "blue", "white"),
    logging.WARNING: LevelStyle("Warning", "yellow", "white"),
    logging.ERROR: LevelStyle("Error", "red", "red"),
    logging.CRITICAL: LevelStyle("Critical", "bold red", "red"),
}

class LogFormatter(logging.Formatter):
    """Renders records with rich styles, one line per record.

    Levels without a style fall back to the plain `logging.Formatter` output.
    """

    def __init__(self, verbose: bool = False):
        super().__init__()

        self.verbose: bool = verbose

    @override
    def format(self, record: logging.LogRecord) -> str:
        style = LEVEL_STYLES.get(record.levelno)
        if style is None:
            return super().format(record)

        text = style.render(record.getMessage())
        if self.verbose:
            text.append(
                f"\n-> {record.pathname}:{record.funcName}:{record.lineno}",
                style=LOCATION_STYLE,
            )

        with _console.capture() as capture:
            _console.print(text, end="")

        return capture.get()


def setup_logging(
    logger: logging.Logger | None = None, settings: LogSettings | None = None
):
    """Configure the given logger or the root logger if None."""
    if logger is None:
        logger = logging.getLogger()

    if settings is None:
        settings = LogSettings.from_env()

    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(LogFormatter(settings.verbose))

    logger.setLevel(settings.level)
    logger.addHandler(handler)
