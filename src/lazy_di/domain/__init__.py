"""
Domain layer - Core business logic and models.

This layer contains the fundamental business rules and models for dependency injection.
It has no dependencies on other layers.
"""

from .enums import BindingKind, ResolutionState
from .exceptions import (
    ConstructionError,
    DIException,
    DuplicateModuleError,
    InvalidDefinitionError,
    UnresolvableError,
)
from .interfaces import IBindingLookup, IContainer, IInjector
from .models import (
    ConstructedInstance,
    Injectable,
    InjectableItem,
    Resolution,
    ReturnedObject,
    inject,
)

__all__ = [
    # Enums
    "BindingKind",
    "ResolutionState",
    # Exceptions
    "DIException",
    "DuplicateModuleError",
    "UnresolvableError",
    "InvalidDefinitionError",
    "ConstructionError",
    # Interfaces
    "IBindingLookup",
    "IContainer",
    "IInjector",
    # Models
    "Injectable",
    "InjectableItem",
    "ConstructedInstance",
    "ReturnedObject",
    "Resolution",
    "inject",
]
