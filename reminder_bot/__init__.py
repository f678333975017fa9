"""
reminder_bot - chat commands in, reminders out
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _get_version() -> str:
    """Installed distribution version, or pyproject.toml in a source checkout."""
    try:
        return version("reminder-bot")
    except PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        import tomllib

        return tomllib.loads(pyproject_path.read_text())["project"]["version"]
    return "0.0.0-unknown"


__version__ = _get_version()
__logo__ = "⏰"
