import logging
import re
from typing import Iterable

from rich.logging import RichHandler

from apologies.config import DEFAULT_COLORS

# Simple color theme for Rich
COLOR = {
    "move": "bold green",
    "lap": "bold cyan",
    "collision": "bold magenta",
    "winner": "bold yellow",
    "warning": "bold red",
}

EVENT_PATTERNS = {
    "move": re.compile(r"\b(Move)\b"),
    "lap": re.compile(r"\b(Lap)\b"),
    "collision": re.compile(r"\b(Collision)\b"),
    "winner": re.compile(r"\b(Winner)\b"),
}

# Pawn colors that rich also knows as style names
RICH_STYLES = {"red", "blue", "green", "yellow", "magenta", "cyan", "white"}


class RichMarkupFormatter(logging.Formatter):
    """Highlight event keywords and pawn colors with rich markup."""

    def __init__(self, pawn_colors: Iterable[str] = DEFAULT_COLORS) -> None:
        super().__init__()
        names = sorted(set(pawn_colors), key=len, reverse=True)
        self.pawn_pattern = (
            re.compile(rf"\b({'|'.join(map(re.escape, names))})\b") if names else None
        )

    def format(self, record: logging.LogRecord) -> str:
        styled = record.getMessage()

        # pawn names first: event styles contain color words
        if self.pawn_pattern is not None:
            styled = self.pawn_pattern.sub(_pawn_markup, styled)

        for event, pattern in EVENT_PATTERNS.items():
            styled = pattern.sub(rf"[{COLOR[event]}]\1[/{COLOR[event]}]", styled)

        if record.levelno >= logging.WARNING:
            styled = f"[{COLOR['warning']}]{styled}[/{COLOR['warning']}]"

        return f"[dim]{record.name}[/dim]  {styled}"


def _pawn_markup(match: re.Match[str]) -> str:
    name = match.group(1)
    style = name if name in RICH_STYLES else "bold"
    return f"[{style}]{name}[/{style}]"


def configure_logging(
    level: int = logging.INFO, pawn_colors: Iterable[str] = DEFAULT_COLORS
) -> None:
    logger = logging.getLogger()
    logger.setLevel(level)
    handler = RichHandler(markup=True, show_path=False, show_time=False)
    handler.setFormatter(RichMarkupFormatter(pawn_colors))
    logger.handlers.clear()
    logger.addHandler(handler)
