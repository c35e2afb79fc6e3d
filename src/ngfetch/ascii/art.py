"""ASCII art banner loading."""

import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).parent / "assets"


class AssetLoadError(Exception):
    """Raised when an ASCII art asset cannot be read."""


def resolve_art_path(name: str) -> Path:
    """Resolve an art name to a file.

    ``name`` is either a path to an existing file or the stem of a bundled
    asset such as ``default``.
    """
    candidate = Path(name).expanduser()
    if candidate.is_file():
        return candidate
    return ASSETS_DIR / f"{name}.txt"


def list_bundled_art() -> list[str]:
    return sorted(p.stem for p in ASSETS_DIR.glob("*.txt"))


def load_art(name: str) -> str:
    """Load ASCII art by name or path.

    Raises:
        AssetLoadError: If the asset is missing or unreadable.
    """
    path = resolve_art_path(name)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise AssetLoadError(f"ASCII art not found: {path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise AssetLoadError(f"Could not read ASCII art {path}: {e}") from e


def print_ascii_art(console: Console, name: str) -> bool:
    """Print ASCII art verbatim.

    Returns:
        True if the art was printed, False if it could not be loaded.
    """
    try:
        art = load_art(name)
    except AssetLoadError as e:
        logger.warning(f"Error loading ASCII art: {e}")
        return False

    console.print(Text(art.rstrip("\n")), soft_wrap=True)
    return True
