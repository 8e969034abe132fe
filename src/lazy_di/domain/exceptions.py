from typing import Any, Optional


def _describe(definition: Any) -> str:
    return getattr(definition, "__qualname__", None) or getattr(definition, "__name__", None) or repr(definition)


class DIException(Exception):
    """Base exception for DI-related errors."""


class DuplicateModuleError(DIException):
    """Raised when a module name is declared a second time with a dependency list.

    Attributes:
        module_name: The module that was already registered.
    """

    def __init__(self, module_name: str) -> None:
        self.module_name = module_name
        super().__init__(f"You have already registered a module called: {module_name}")


class UnresolvableError(DIException):
    """Raised when a dependency name cannot be found for a module.

    The name was searched in values, services, factories and modules, in that
    order, without a match.

    Attributes:
        dependency: The missing dependency name.
        module_name: The module that requested it.
    """

    def __init__(self, dependency: str, module_name: Optional[str] = None) -> None:
        self.dependency = dependency
        self.module_name = module_name
        message = f"Unable to find injectable, did you forget to register {dependency}"
        if module_name is not None:
            message += f" for module {module_name}"
        super().__init__(message)


class InvalidDefinitionError(DIException):
    """Raised when a definition that must be constructed is not callable.

    Attributes:
        definition: The offending definition.
        reason: Optional reason for the failure.
    """

    def __init__(self, definition: Any, reason: Optional[str] = None) -> None:
        self.definition = definition
        self.reason = reason
        message = f"Invalid definition: {_describe(definition)}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)


class ConstructionError(DIException):
    """Raised when user code fails while a definition is being constructed.

    The original exception is chained as ``__cause__``.

    Attributes:
        definition: The definition being constructed.
        reason: Optional reason for the failure.
    """

    def __init__(self, definition: Any, reason: Optional[str] = None) -> None:
        self.definition = definition
        self.reason = reason
        message = f"Failed to construct {_describe(definition)}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
