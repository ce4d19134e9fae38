"""
Exposes the version of geodirect
"""

__all__ = ['__version__']

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _source_tree_version() -> Optional[str]:
    """The version recorded in the repository's VERSION file, for uninstalled checkouts"""
    if not _VERSION_FILE.is_file():
        return None

    return _VERSION_FILE.read_text(encoding='utf-8').strip().lstrip('v') or None


try:
    __version__ = version('geodirect')
except PackageNotFoundError:
    __version__ = _source_tree_version()
