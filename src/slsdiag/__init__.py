"""slsdiag: diagnostic message reporting for the Serverless CLI."""

from slsdiag.version import __version__

__all__ = ["__version__"]
