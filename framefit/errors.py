"""
Framefit exceptions.
"""


class FramefitError(Exception):
    """Base class for framefit errors."""


class HostError(FramefitError):
    """A host primitive failed (no answer from the terminal, API call failed)."""
