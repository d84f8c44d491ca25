"""
CLI Module - Console output helpers for sherror.
"""

from .output import Console, default_printer, setup_logging

__all__ = ["Console", "default_printer", "setup_logging"]
