"""
Testing utilities module.

Provides helpers for testing applications built on lazy-di containers.
"""

from .utilities import ManualScheduler, MockBindings, TestContainer

__all__ = [
    "ManualScheduler",
    "MockBindings",
    "TestContainer",
]
