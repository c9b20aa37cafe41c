from importlib import metadata

try:
    __version__ = metadata.version("easylang")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    __version__ = "1.0.0"
