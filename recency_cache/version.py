"""Package version.

A source checkout reads ``[project].version`` from pyproject.toml; an
installed copy without the file reads the distribution metadata instead.
"""

import tomllib
from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "recency-cache"

_PYPROJECT_PATH = Path(__file__).resolve().parent.parent / "pyproject.toml"


def get_version() -> str:
    """Return the version string of the recency-cache distribution."""
    if _PYPROJECT_PATH.is_file():
        with open(_PYPROJECT_PATH, "rb") as f:
            data = tomllib.load(f)
        return data["project"]["version"]
    return metadata.version(DISTRIBUTION_NAME)


__version__: str = get_version()
