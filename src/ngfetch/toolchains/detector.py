"""Best-effort detection of installed language toolchains."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ngfetch.config.models import ToolSpec

from .extract import extract_version
from .runner import CommandRunner, ProbeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolchainEntry:
    name: str
    icon: str
    version: str


class ToolchainDetector:
    """Probe each configured tool for its version.

    A tool that is missing, exits non-zero, times out, or prints something
    its rule cannot parse is a detection miss and is left out of the result.
    """

    def __init__(self, runner: Optional[CommandRunner] = None):
        self.runner = runner or CommandRunner()

    def probe(self, spec: ToolSpec) -> str:
        """Return the detected version for ``spec``, or "" on a miss."""
        try:
            result = self.runner.run(spec.command, spec.args)
        except ProbeError as e:
            logger.debug(f"{spec.name} probe missed: {e}")
            return ""

        if result.returncode != 0:
            logger.debug(f"{spec.name} probe exited with code {result.returncode}")
            return ""

        version = extract_version(spec.rule, result.output, spec.prefix)
        if not version:
            logger.debug(f"{spec.name} probe output not recognised: {result.output.strip()!r}")
        return version

    def detect(self, tool_specs: Iterable[ToolSpec]) -> list[ToolchainEntry]:
        """Detect installed toolchains, preserving configured order."""
        entries = []
        for spec in tool_specs:
            version = self.probe(spec)
            if version:
                entries.append(ToolchainEntry(name=spec.name, icon=spec.icon, version=version))
        return entries
