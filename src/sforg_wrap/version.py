"""Single source of truth for the sforg-wrap version string."""

__version__ = "0.3.0"
