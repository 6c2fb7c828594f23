"""Version information for the wsclean package."""

# pyproject.toml reads the project version from here.
__version__ = "0.2.0"

__all__ = ["__version__"]
