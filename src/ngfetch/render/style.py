"""Semantic color policy for terminal output."""

from typing import IO, Optional

from rich.console import Console
from rich.style import Style
from rich.text import Text

GREEN = "green"
BLUE = "blue"
RED = "red"
YELLOW = "yellow"
MAGENTA = "magenta"
CYAN = "cyan"
WHITE = "white"

SEMANTIC_COLORS = {
    GREEN: "bright_green",
    BLUE: "bright_blue",
    RED: "bright_red",
    YELLOW: "bright_yellow",
    MAGENTA: "bright_magenta",
    CYAN: "bright_cyan",
    WHITE: "bright_white",
}


class StylePolicy:
    """Map semantic color names to rich styles.

    When disabled every lookup returns a null style and consoles are built
    without a color system, so nothing written contains escape sequences.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def style_for(self, color: Optional[str], bold: bool = False) -> Style:
        if not self.enabled:
            return Style.null()
        hue = SEMANTIC_COLORS.get(color or "")
        if hue is None and not bold:
            return Style.null()
        return Style(color=hue, bold=bold or None)

    def styled(self, text: str, color: Optional[str] = None, bold: bool = False) -> Text:
        return Text(text, style=self.style_for(color, bold=bold))

    def make_console(
        self,
        file: Optional[IO[str]] = None,
        force_terminal: Optional[bool] = None,
        stderr: bool = False,
    ) -> Console:
        if not self.enabled:
            color_system = None
        elif force_terminal:
            color_system = "standard"
        else:
            color_system = "auto"

        return Console(
            file=file,
            force_terminal=force_terminal,
            stderr=stderr,
            color_system=color_system,
            highlight=False,
            emoji=False,
        )
