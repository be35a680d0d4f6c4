"""An in-engine command console with a log, filters and stat overlay toggles."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from enum import Enum

_MAX_MESSAGE = 1023

HELP_LINES = (
    "Available commands:",
    " - clear: Clears the console",
    " - help: Shows available commands",
    " - stat fps: Toggle FPS display",
    " - stat memory: Toggle Memory display",
    " - stat none: Hide all stat overlays",
)


class LogLevel(Enum):
    DISPLAY = 0
    WARNING = 1
    ERROR = 2


@dataclass(frozen=True)
class LogEntry:
    level: LogLevel
    message: str


@dataclass
class StatOverlay:
    """Which statistics the overlay shows."""

    show_fps: bool = False
    show_memory: bool = False
    show_render: bool = False

    def toggle_stat(self, command: str) -> None:
        if command == "stat fps":
            self.show_fps = True
            self.show_render = True
        elif command == "stat memory":
            self.show_memory = True
            self.show_render = True
        elif command == "stat none":
            self.show_fps = False
            self.show_memory = False
            self.show_render = False


def _passes_filter(pattern: str, text: str) -> bool:
    """Comma-separated, case-insensitive substrings; a leading '-' excludes."""
    terms = [term.strip() for term in pattern.split(",")]
    terms = [term for term in terms if term]
    if not terms:
        return True
    lowered = text.lower()
    includes = 0
    for term in terms:
        if term.startswith("-"):
            excluded = term[1:].lower()
            if excluded and excluded in lowered:
                return False
        else:
            includes += 1
            if term.lower() in lowered:
                return True
    return includes == 0


@dataclass
class Console:
    """Log storage and command execution for the editor console."""

    items: list[LogEntry] = field(default_factory=list)
    history: list[str] = field(default_factory=list)
    history_pos: int = -1
    scroll_to_bottom: bool = False
    filter_text: str = ""
    show_display: bool = True
    show_warning: bool = True
    show_error: bool = True
    is_open: bool = True
    overlay: StatOverlay = field(default_factory=StatOverlay)

    def clear(self) -> None:
        self.items.clear()

    def add_log(self, level: LogLevel, message: str) -> None:
        self.items.append(LogEntry(level, message[:_MAX_MESSAGE]))
        self.scroll_to_bottom = True

    def execute_command(self, command: str) -> None:
        self.add_log(LogLevel.DISPLAY, f"Executing command: {command}")
        if command == "clear":
            self.clear()
        elif command == "help":
            for line in HELP_LINES:
                self.add_log(LogLevel.DISPLAY, line)
        elif command.startswith("stat "):
            self.overlay.toggle_stat(command)
        else:
            self.add_log(LogLevel.ERROR, f"Unknown command: {command}")

    def submit(self, text: str) -> None:
        """Handle a line entered in the input box."""
        if not text:
            return
        self.add_log(LogLevel.DISPLAY, f">> {text}")
        self.execute_command(text)
        self.history.append(text)
        self.history_pos = -1
        self.scroll_to_bottom = True

    def toggle(self) -> None:
        self.is_open = not self.is_open

    def visible_entries(self) -> list[LogEntry]:
        """Entries passing the text filter and the per-level switches."""
        shown = {
            LogLevel.DISPLAY: self.show_display,
            LogLevel.WARNING: self.show_warning,
            LogLevel.ERROR: self.show_error,
        }
        return [
            entry
            for entry in self.items
            if _passes_filter(self.filter_text, entry.message) and shown[entry.level]
        ]


@functools.lru_cache(maxsize=None)
def get_console() -> Console:
    """The shared console instance."""
    return Console()