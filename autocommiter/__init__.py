"""AI commit message generator with .gitignore safety checks."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("autocommiter")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
