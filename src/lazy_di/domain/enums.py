from enum import Enum


class BindingKind(str, Enum):
    """Namespaces a binding can live in.

    Attributes:
        MODULE: A whole module, addressed by its name.
        VALUE: Returned as-is once resolved.
        SERVICE: Constructed once and shared.
        FACTORY: Constructed anew on every read.
    """

    MODULE = "module"
    VALUE = "value"
    SERVICE = "service"
    FACTORY = "factory"

    def __str__(self) -> str:
        return self.value


class ResolutionState(str, Enum):
    """Whether the container's merge and resolve pass has run since the last registration."""

    PENDING = "pending"
    RESOLVED = "resolved"

    def __str__(self) -> str:
        return self.value
