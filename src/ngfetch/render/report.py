"""Formatted console report of host facts and detected toolchains."""

import logging
from dataclasses import dataclass
from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ngfetch.collectors.system_info import SystemSnapshot
from ngfetch.toolchains.detector import ToolchainEntry

from .style import BLUE, CYAN, GREEN, MAGENTA, RED, WHITE, YELLOW, StylePolicy

logger = logging.getLogger(__name__)

LAYOUTS = ("boxed", "plain")
DEFAULT_TOTAL_WIDTH = 60

TITLE = "🌟 SYSTEM INFORMATION DASHBOARD 🌟"
TOOLCHAIN_TITLE = "🚀 INSTALLED PROGRAMMING LANGUAGES"
TABLE_HEADERS = ("Icon", "Language", "Version")

TITLE_COLOR = MAGENTA
HEADER_COLOR = CYAN


@dataclass
class MetricLine:
    icon: str
    label: str
    value: str
    color: str


def format_gb(value: float) -> str:
    return f"{value:.2f} GB"


def format_hours(value: float) -> str:
    return f"{value:.2f} hours"


def format_network(sent_mb: float, recv_mb: float) -> str:
    return f"{sent_mb:.2f} MB sent | {recv_mb:.2f} MB received"


def build_metric_lines(snapshot: SystemSnapshot) -> list[MetricLine]:
    """One line per reported metric, in display order."""
    return [
        MetricLine("🖥️", "Platform", snapshot.platform, RED),
        MetricLine("🧊", "Kernel", snapshot.kernel, BLUE),
        MetricLine("🏠", "Hostname", snapshot.hostname, YELLOW),
        MetricLine(
            "🧠", "CPU", f"{snapshot.cpu_model} ({snapshot.cpu_core_count} cores)", GREEN
        ),
        MetricLine("💾", "Memory", format_gb(snapshot.memory_total_gb), MAGENTA),
        MetricLine("📂", "Disk", format_gb(snapshot.disk_total_gb), CYAN),
        MetricLine("⏳", "Uptime", format_hours(snapshot.uptime_hours), WHITE),
        MetricLine(
            "🌐",
            "Network",
            format_network(snapshot.network_sent_mb, snapshot.network_recv_mb),
            YELLOW,
        ),
    ]


def get_padding(text: str, total_width: int) -> str:
    """Spaces needed to right-pad ``text`` to ``total_width``.

    Width is counted in code points so multi-byte icons count once.
    """
    return " " * max(total_width - len(text), 0)


class ReportRenderer:
    """Render a SystemSnapshot and toolchain list to a rich console.

    Two layouts are supported: ``boxed`` draws a double-line frame with
    every row padded to ``total_width``; ``plain`` prints the same rows
    without the frame.
    """

    def __init__(
        self,
        console: Console,
        style: StylePolicy,
        layout: str = "boxed",
        total_width: int = DEFAULT_TOTAL_WIDTH,
    ):
        if layout not in LAYOUTS:
            raise ValueError(f"Unknown layout '{layout}'. Expected one of: {', '.join(LAYOUTS)}")
        self.console = console
        self.style = style
        self.layout = layout
        self.total_width = total_width

    def render(self, snapshot: SystemSnapshot, toolchains: Sequence[ToolchainEntry]) -> None:
        lines = [self.metric_text(line) for line in build_metric_lines(snapshot)]
        logger.debug(f"Rendering {len(lines)} metric lines, {len(toolchains)} toolchains")

        if self.layout == "boxed":
            self._render_boxed(lines, toolchains)
        else:
            self._render_plain(lines, toolchains)

    def metric_text(self, line: MetricLine) -> Text:
        text = Text()
        text.append(f"{line.icon} ")
        text.append(line.label, style=self.style.style_for(HEADER_COLOR, bold=True))
        text.append(": ")
        text.append(line.value, style=self.style.style_for(line.color))
        return text

    def toolchain_table(self, toolchains: Sequence[ToolchainEntry]) -> Table:
        table = Table(
            box=None,
            show_edge=False,
            header_style=self.style.style_for(HEADER_COLOR, bold=True),
        )
        for header in TABLE_HEADERS:
            table.add_column(header, justify="center")

        for entry in toolchains:
            table.add_row(Text(entry.icon), Text(entry.name), Text(entry.version))

        return table

    def _render_boxed(self, lines: list[Text], toolchains: Sequence[ToolchainEntry]) -> None:
        self._emit(self._border("╔", "╗"))
        self._emit(self._boxed_row(self.style.styled(TITLE, TITLE_COLOR, bold=True)))
        self._emit(self._border("╠", "╣"))
        for line in lines:
            self._emit(self._boxed_row(line))
        self._emit(self._border("╠", "╣"))
        self._emit(self._boxed_row(self.style.styled(TOOLCHAIN_TITLE, TITLE_COLOR, bold=True)))
        self._emit(self._border("╠", "╣"))
        self._emit(self.toolchain_table(toolchains))
        self._emit(self._border("╚", "╝"))

    def _render_plain(self, lines: list[Text], toolchains: Sequence[ToolchainEntry]) -> None:
        self._emit(self.style.styled(TITLE, TITLE_COLOR, bold=True))
        for line in lines:
            self._emit(line)
        self._emit(Text())
        self._emit(self.style.styled(TOOLCHAIN_TITLE, TITLE_COLOR, bold=True))
        self._emit(self.toolchain_table(toolchains))

    def _border(self, left: str, right: str) -> Text:
        return self.style.styled(left + "═" * (self.total_width + 2) + right, TITLE_COLOR, bold=True)

    def _boxed_row(self, content: Text) -> Text:
        frame = self.style.style_for(TITLE_COLOR, bold=True)
        row = Text()
        row.append("║ ", style=frame)
        row.append_text(content)
        row.append(get_padding(content.plain, self.total_width))
        row.append(" ║", style=frame)
        return row

    def _emit(self, renderable) -> None:
        # Text rows are pre-padded and must never wrap
        self.console.print(renderable, soft_wrap=isinstance(renderable, Text))
