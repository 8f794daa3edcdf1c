"""Command module exports."""

from . import watch

__all__ = ["watch"]
