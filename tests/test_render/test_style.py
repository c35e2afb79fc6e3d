"""Tests for the semantic color policy."""

import io

from rich.style import Style

from ngfetch.render.style import GREEN, RED, SEMANTIC_COLORS, StylePolicy


class TestStyleFor:
    def test_known_color(self):
        style = StylePolicy().style_for(GREEN)
        assert style == Style(color="bright_green")

    def test_bold(self):
        style = StylePolicy().style_for(RED, bold=True)
        assert style.bold is True
        assert style.color.name == "bright_red"

    def test_unknown_color_falls_back_to_unstyled(self):
        assert StylePolicy().style_for("chartreuse") == Style.null()

    def test_unknown_color_keeps_bold(self):
        assert StylePolicy().style_for("chartreuse", bold=True) == Style(bold=True)

    def test_disabled_is_always_null(self):
        policy = StylePolicy(enabled=False)
        for color in SEMANTIC_COLORS:
            assert policy.style_for(color, bold=True) == Style.null()


class TestStyled:
    def test_text_carries_style(self):
        text = StylePolicy().styled("ok", GREEN)
        assert text.plain == "ok"
        assert text.style == Style(color="bright_green")


class TestMakeConsole:
    def test_enabled_emits_escape_codes(self):
        buf = io.StringIO()
        policy = StylePolicy(enabled=True)
        console = policy.make_console(file=buf, force_terminal=True)
        console.print(policy.styled("hello", GREEN, bold=True))
        assert "\x1b[" in buf.getvalue()
        assert "hello" in buf.getvalue()

    def test_disabled_is_plain(self):
        buf = io.StringIO()
        policy = StylePolicy(enabled=False)
        console = policy.make_console(file=buf, force_terminal=True)
        console.print(policy.styled("hello", GREEN, bold=True))
        console.print("[bold red]markup[/bold red]")
        assert "\x1b" not in buf.getvalue()
        assert buf.getvalue() == "hello\nmarkup\n"

    def test_non_terminal_is_plain(self, monkeypatch):
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
        buf = io.StringIO()
        policy = StylePolicy(enabled=True)
        console = policy.make_console(file=buf)
        console.print(policy.styled("hello", GREEN))
        assert "\x1b" not in buf.getvalue()
