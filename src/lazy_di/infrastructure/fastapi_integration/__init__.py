"""
FastAPI integration module.

Provides helpers for exposing lazy-di bindings to FastAPI endpoints.
"""

from .integration import (
    attach_container,
    create_fastapi_dependency,
    create_request_dependency,
    inject_bindings,
)

__all__ = [
    "attach_container",
    "create_fastapi_dependency",
    "create_request_dependency",
    "inject_bindings",
]
