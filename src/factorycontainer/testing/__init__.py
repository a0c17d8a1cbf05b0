"""Testing utilities for the factory container."""

from .mocks import CountingFactory, RecordingModule, StaticInvokable

__all__ = [
    "CountingFactory",
    "RecordingModule",
    "StaticInvokable",
]
