"""
Exception types for the playback engine.

Domain outcomes (bad input, underflow, missing keys) are never raised; they
are emitted as terminal events. These exceptions cover programmer errors.
"""


class DeterminismError(Exception):
    """Raised when a producer returns different logs for identical input."""
    pass


class UnknownAlgorithmError(Exception):
    """Raised when an algorithm id is not registered."""
    pass


class SnapshotError(Exception):
    """Raised when a tree snapshot violates its structural invariants."""
    pass
