"""On-screen debug messages and coloured console logging."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import IntEnum

from .mathutils import random_between

Color = tuple[int, int, int, int]

DEFAULT_TEXT_COLOR: Color = (0, 230, 230, 230)


class LogLevel(IntEnum):
    ALL = 0
    TRACE = 1
    DEBUG = 2
    INFO = 3
    WARNING = 4
    ERROR = 5
    FATAL = 6
    NONE = 7


_PREFIXES = {
    LogLevel.TRACE: "\x1b[36mTRACE: ",
    LogLevel.DEBUG: "\x1b[34mDEBUG: ",
    LogLevel.INFO: "\x1b[37mINFO: ",
    LogLevel.WARNING: "\x1B[33mWARNING: ",
    LogLevel.ERROR: "\x1B[31mERROR: ",
    LogLevel.FATAL: "\x1B[41mFATAL: ",
}


@dataclass
class Message:
    """A line of text shown on screen for a limited time."""

    text_message: str = ""
    duration: float = 0.0
    label: str = ""
    start: float = 0.0
    end: float = 0.0
    text_color: Color = (0, 0, 0, 0)
    size: int = 0

    def set_start(self) -> None:
        self.start = time.monotonic()

    def set_end(self) -> None:
        self.end = time.monotonic()

    def is_time_elapsed(self) -> bool:
        """True while the message is still within its display time."""
        self.set_end()
        return (self.end - self.start) < self.duration


class Printer:
    """Keeps labelled on-screen messages; active only in debug mode."""

    def __init__(self, debug: bool = __debug__) -> None:
        self.debug = debug
        self.size = 20
        self.spacing = 1.0
        self.level_log = LogLevel.ALL if debug else LogLevel.ERROR
        self.messages: list[Message] = []

    def _add(
        self, text: str, duration: float, label: str, text_color: Color, log: bool, size: int
    ) -> None:
        if not self.debug:
            return
        for message in self.messages:
            if message.label == label:
                message.set_start()
                message.text_message = text
                message.text_color = text_color
                if log:
                    print(f"LOG_SCREEN: {message.text_message}")
                return

        message = Message(
            text_message=text,
            duration=duration,
            label=label,
            text_color=text_color,
            size=size,
        )
        message.set_start()
        self.messages.append(message)

    @staticmethod
    def _random_label() -> str:
        return f"{random_between(1, 3000):.6f}"

    def print_on_screen(
        self,
        text: str,
        duration: float = 2.0,
        label: str = "",
        text_color: Color = DEFAULT_TEXT_COLOR,
        log: bool = False,
    ) -> None:
        """Show ``text``; each line before a newline gets its own numbered label."""
        *lines, last = text.split("\n")
        for count, line in enumerate(lines):
            line_label = (label or self._random_label()) + str(count)
            self._add(line, duration, line_label, text_color, log, self.size - 3)

        self._add(last, duration, label or self._random_label(), text_color, log, self.size)

    def draw_messages(self, screen_height: float) -> list[tuple[str, float, float, Color]]:
        """Drop expired messages and lay out the rest as (text, x, y, colour) from the top."""
        if not self.debug:
            return []

        self.messages = [message for message in self.messages if message.is_time_elapsed()]

        layout: list[tuple[str, float, float, Color]] = []
        y = 16.0
        for message in self.messages:
            layout.append((message.text_message, 30.0, y, message.text_color))
            y += message.size
            if y > screen_height:
                break
        return layout

    def set_font(self, size: int = 20, spacing: float = 1.0) -> None:
        """Set the text size and letter spacing used for messages."""
        if not self.debug:
            return
        self.size = size
        self.spacing = spacing


def format_log(level: int, text: str) -> str:
    """Console line for ``text``, with a coloured prefix for known levels."""
    prefix = _PREFIXES.get(level, "")
    return f"{prefix}{text}\x1B[0m"


def log(level: int, text: str) -> None:
    """Print a log line; outside debug mode only errors and worse are shown."""
    if not __debug__ and level < LogLevel.ERROR:
        return
    print(format_log(level, text))