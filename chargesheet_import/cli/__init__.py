"""Command line entry point (`chargesheet-import`)."""

from .main import main

__all__ = ["main"]
