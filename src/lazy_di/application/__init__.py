"""
Application layer - Use cases and orchestration.

This layer contains the use cases that orchestrate domain objects: the
injection engine, modules, inheritance between modules and the container.
"""

from .container import Container, default_container
from .dependency_merge import DependencyMerger
from .injector import Injector
from .module import Module
from .overrides import OverrideRegistry

__all__ = [
    "Container",
    "default_container",
    "DependencyMerger",
    "Injector",
    "Module",
    "OverrideRegistry",
]
