"""Testing utilities for code that builds configurations.

Provides source doubles to enable fast, isolated testing.
"""
from configweave.testing.mocks import (
    DelayedSource,
    FailingSource,
    RecordingSource,
)

__all__ = [
    "DelayedSource",
    "FailingSource",
    "RecordingSource",
]
