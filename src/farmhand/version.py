from __future__ import annotations

from importlib import metadata
from pathlib import Path

DISTRIBUTION = "farmhand-theme"
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """Installed distribution version, else the checkout's VERSION file."""
    try:
        installed = metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        installed = None
    return installed or read_version_file(Path(__file__).resolve().parent)


def read_version_file(start: Path, *, depth: int = 3) -> str:
    # src/farmhand -> src -> repo root
    for folder in [start, *start.parents][:depth]:
        candidate = folder / "VERSION"
        if candidate.is_file():
            text = candidate.read_text(encoding="utf-8").strip()
            if text:
                return text
    return FALLBACK_VERSION


def version_banner() -> str:
    return f"{DISTRIBUTION} {get_version()}"


__all__ = ["DISTRIBUTION", "FALLBACK_VERSION", "get_version", "read_version_file", "version_banner"]
