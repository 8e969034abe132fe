from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Sequence

from lazy_di.domain.enums import BindingKind, ResolutionState
from lazy_di.domain.models import Resolution


class IBindingLookup(ABC):
    """Abstract interface for looking up bindings by kind and name.

    Implemented by modules; the injector resolves dependency names against it.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the module requesting the lookup, used in error messages."""

    @abstractmethod
    def has_binding(self, kind: BindingKind, name: str) -> bool:
        """Return whether a binding (or a mock for it) exists.

        Args:
            kind: The namespace to search.
            name: The binding name.
        """

    @abstractmethod
    def get(self, kind: BindingKind, name: str) -> Any:
        """Return the resolved binding, or ``None`` when it does not exist.

        Args:
            kind: The namespace to search.
            name: The binding name.
        """


class IInjector(ABC):
    """Abstract interface for constructing definitions with injected dependencies."""

    @abstractmethod
    def resolve(self, definition: Any, lookup: IBindingLookup) -> Any:
        """Resolve the dependencies of a definition and construct it.

        Args:
            definition: A plain constructible or an ``Injectable``.
            lookup: Where dependency names are searched.

        Returns:
            The effective instance.

        Raises:
            UnresolvableError: If a dependency name cannot be found.
        """

    @abstractmethod
    def construct(self, target: Any, args: Sequence[Any] = ()) -> Resolution:
        """Invoke a class or function with positional arguments.

        Args:
            target: The class or function.
            args: Resolved dependencies, in declared order.
        """


class IContainer(ABC):
    """Abstract interface for the module registry."""

    @property
    @abstractmethod
    def modules(self) -> Dict[str, Any]:
        """The live module table, keyed by module name."""

    @property
    @abstractmethod
    def state(self) -> ResolutionState:
        """Whether the resolution pass has run since the last registration."""

    @abstractmethod
    def module(self, name: str, dependencies: Optional[List[str]] = None) -> Any:
        """Register a new module or return an existing one.

        Args:
            name: The module name.
            dependencies: Names of modules whose bindings are inherited.
        """

    @abstractmethod
    def ensure_resolved(self) -> None:
        """Run the merge and resolve pass unless it already ran."""

    @abstractmethod
    def run(self, callback: Optional[Callable[[], Any]] = None) -> "IContainer":
        """Force the resolution pass, then invoke the callback.

        Args:
            callback: Called after the pass, even when it had already run.
        """

    @abstractmethod
    def set_mock_module(self, name: str, definition: Any) -> Any:
        """Replace a module with a mock everywhere in the container."""

    @abstractmethod
    def set_mock_value(self, name: str, definition: Any) -> Any:
        """Replace a value with a mock everywhere in the container."""

    @abstractmethod
    def set_mock_service(self, name: str, definition: Any) -> Any:
        """Replace a service with a mock everywhere in the container."""

    @abstractmethod
    def set_mock_factory(self, name: str, definition: Any) -> Any:
        """Replace a factory with a mock everywhere in the container."""

    @abstractmethod
    def clear_mocks(self) -> None:
        """Remove every registered mock."""
