"""
lazy-di: Lazy, module-based Dependency Injection container with mocking.

Public API exports for the lazy-di package.
"""

# Application exports
from lazy_di.application.container import Container, default_container
from lazy_di.application.module import Module

# Domain exports
from lazy_di.domain.enums import BindingKind, ResolutionState
from lazy_di.domain.exceptions import (
    ConstructionError,
    DIException,
    DuplicateModuleError,
    InvalidDefinitionError,
    UnresolvableError,
)
from lazy_di.domain.models import Injectable, inject

# Infrastructure exports
from lazy_di.infrastructure.logging import LoggingConfig

__version__ = "0.1.0"

__all__ = [
    # Container
    "Container",
    "Module",
    "default_container",
    # Bindings
    "Injectable",
    "inject",
    # Enums
    "BindingKind",
    "ResolutionState",
    # Exceptions
    "DIException",
    "DuplicateModuleError",
    "UnresolvableError",
    "InvalidDefinitionError",
    "ConstructionError",
    # Configuration
    "LoggingConfig",
]
