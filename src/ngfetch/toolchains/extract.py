"""Version string extraction rules.

Toolchains do not agree on a ``--version`` output format, so each probe
names one of the rules below instead of sharing a general parser.
"""

from typing import Callable


def second_token(output: str, prefix: str = "") -> str:
    """``Python 3.11.4`` -> ``3.11.4``."""
    parts = output.split()
    return parts[1] if len(parts) > 1 else ""


def strip_v(output: str, prefix: str = "") -> str:
    """``v18.16.0`` -> ``18.16.0``."""
    return output.removeprefix("v")


def quoted_version(output: str, prefix: str = "") -> str:
    """``openjdk version "17.0.2" 2022-01-18`` -> ``17.0.2``."""
    for line in output.splitlines():
        if "version" in line:
            parts = line.split('"')
            if len(parts) > 2:
                return parts[1]
            return ""
    return ""


def first_token(output: str, prefix: str = "") -> str:
    """``1.2.3 (build abc)`` -> ``1.2.3``."""
    parts = output.split()
    return parts[0] if parts else ""


def token_prefix(output: str, prefix: str = "") -> str:
    """``go version go1.21.0 linux/amd64`` with prefix ``go`` -> ``1.21.0``."""
    if not prefix:
        return ""
    for token in output.split():
        if token.startswith(prefix) and len(token) > len(prefix):
            return token[len(prefix):]
    return ""


EXTRACTION_RULES: dict[str, Callable[[str, str], str]] = {
    "second_token": second_token,
    "strip_v": strip_v,
    "quoted_version": quoted_version,
    "first_token": first_token,
    "token_prefix": token_prefix,
}


def extract_version(rule: str, output: str, prefix: str = "") -> str:
    """Apply a named extraction rule to trimmed probe output.

    Raises:
        KeyError: If ``rule`` is not a known rule name.
    """
    return EXTRACTION_RULES[rule](output.strip(), prefix).strip()
