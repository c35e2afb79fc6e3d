"""Pydantic models for ngfetch configuration."""

from typing import Literal

from pydantic import BaseModel, Field

ExtractionRuleName = Literal[
    "second_token", "strip_v", "quoted_version", "first_token", "token_prefix"
]


class ToolSpec(BaseModel):
    """A toolchain probe: how to ask a tool for its version."""

    name: str
    icon: str = ""
    command: str
    args: list[str] = Field(default_factory=lambda: ["--version"])
    rule: ExtractionRuleName = "second_token"
    prefix: str = ""  # only used by the token_prefix rule


def default_tool_specs() -> list[ToolSpec]:
    """Probes for the languages reported out of the box."""
    return [
        ToolSpec(name="Python", icon="🐍", command="python", args=["--version"]),
        ToolSpec(
            name="Go", icon="🟢", command="go", args=["version"], rule="token_prefix", prefix="go"
        ),
        ToolSpec(name="Node.js", icon="🟨", command="node", args=["--version"], rule="strip_v"),
        ToolSpec(name="Java", icon="☕", command="java", args=["-version"], rule="quoted_version"),
        ToolSpec(name="Ruby", icon="💎", command="ruby", args=["--version"]),
        ToolSpec(name="Rust", icon="🦀", command="rustc", args=["--version"]),
        ToolSpec(name="PHP", icon="🐘", command="php", args=["--version"]),
    ]


class DisplayConfig(BaseModel):
    """Report appearance."""

    layout: Literal["boxed", "plain"] = "boxed"
    total_width: int = Field(default=60, ge=10)
    colors: bool = True
    ascii: bool = True
    ascii_art: str = "default"


class CollectionConfig(BaseModel):
    """Host metric and probe settings."""

    disk_path: str = "/"
    probe_timeout_s: float = Field(default=3.0, gt=0)


class FetchConfig(BaseModel):
    """Top-level ngfetch configuration."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    collection: CollectionConfig = Field(default_factory=CollectionConfig)
    toolchains: list[ToolSpec] = Field(default_factory=default_tool_specs)
