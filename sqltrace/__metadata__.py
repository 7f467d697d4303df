"""Metadata for the Project."""

from importlib.metadata import PackageNotFoundError, metadata, version

__all__ = ("__project__", "__version__")

try:
    __version__ = version("sqltrace")
    __project__ = metadata("sqltrace")["Name"]
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0"
    __project__ = "sqltrace"
finally:
    del version, PackageNotFoundError, metadata
