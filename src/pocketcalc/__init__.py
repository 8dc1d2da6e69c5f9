"""Desktop four-function calculator built on PySide6."""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pocketcalc")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
