"""Version of the installed argflags distribution."""

from importlib import metadata

__all__ = ["DISTRIBUTION", "__version__"]

DISTRIBUTION = "argflags"


def _installed_version() -> str:
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:  # pragma: no cover - running from a source checkout
        return "0.1.0.dev0"


__version__ = _installed_version()
