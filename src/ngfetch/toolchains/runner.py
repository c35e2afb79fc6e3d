"""Child process execution for toolchain probes."""

import logging
import platform
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 3.0


class ProbeError(Exception):
    """Raised when a probe command cannot be run to completion."""


@dataclass
class CommandResult:
    output: str
    returncode: int


class CommandRunner:
    """Run a command and capture its combined stdout and stderr.

    On Windows commands go through ``cmd /c`` so that ``.bat``/``.cmd``
    shims on PATH resolve. Everywhere else the binary is executed directly.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_S):
        self.timeout = timeout

    def build_argv(self, command: str, args: list[str]) -> list[str]:
        argv = [command, *args]
        if platform.system() == "Windows":
            return ["cmd", "/c", *argv]
        return argv

    def run(self, command: str, args: list[str]) -> CommandResult:
        """Run ``command`` with ``args``.

        Raises:
            ProbeError: If the binary is missing, cannot be started, or
                does not finish within the timeout.
        """
        argv = self.build_argv(command, args)
        try:
            result = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        except FileNotFoundError:
            raise ProbeError(f"{command}: not found") from None
        except subprocess.TimeoutExpired:
            raise ProbeError(f"{command}: timed out after {self.timeout}s") from None
        except OSError as e:
            raise ProbeError(f"{command}: {e}") from e

        return CommandResult(output=result.stdout or "", returncode=result.returncode)
