import inspect
from typing import Any, Dict, Optional, Tuple

from lazy_di.domain import BindingKind, IInjector


class OverrideRegistry:
    """Container-wide mock bindings, consulted before any normal resolution.

    A single map keyed by ``(kind, name)`` holds every override:

    - modules and values are stored verbatim;
    - services are constructed once, when registered;
    - factories keep their definition and are constructed on every read.

    Attributes:
        _injector: Used to construct service and factory mocks.
        _overrides: Mapping of ``(kind, name)`` to the stored override.
    """

    def __init__(self, injector: IInjector) -> None:
        """Initialize an empty registry.

        Args:
            injector: Constructs callable mocks.
        """
        self._injector = injector
        self._overrides: Dict[Tuple[BindingKind, str], Any] = {}

    def set(self, kind: BindingKind, name: str, definition: Any) -> Any:
        """Register an override.

        Args:
            kind: The namespace being overridden.
            name: The binding name.
            definition: The mock. Service and factory mocks that are classes
                or functions are constructed with no arguments; anything else,
                including callable instances such as test doubles, is used as-is.

        Returns:
            The stored module or value, the constructed service, or one freshly
            constructed factory instance.
        """
        if kind == BindingKind.SERVICE:
            definition = self._build(definition)
        self._overrides[(kind, name)] = definition
        return self.get(kind, name)

    def contains(self, kind: BindingKind, name: str) -> bool:
        """Return whether an override exists for ``(kind, name)``."""
        return (kind, name) in self._overrides

    def get(self, kind: BindingKind, name: str) -> Any:
        """Return the override for ``(kind, name)``.

        Factory overrides are constructed anew on every call.

        Raises:
            KeyError: If no override is registered.
        """
        override = self._overrides[(kind, name)]
        if kind == BindingKind.FACTORY:
            return self._build(override)
        return override

    def stored(self, kind: BindingKind, name: str) -> Any:
        """Return the override for ``(kind, name)`` as stored, building nothing.

        Raises:
            KeyError: If no override is registered.
        """
        return self._overrides[(kind, name)]

    def restore(self, kind: BindingKind, name: str, stored: Any) -> None:
        """Put back an entry previously read with :meth:`stored`, verbatim."""
        self._overrides[(kind, name)] = stored

    def remove(self, kind: BindingKind, name: str) -> None:
        """Remove the override for ``(kind, name)`` if there is one."""
        self._overrides.pop((kind, name), None)

    def clear(self, kind: Optional[BindingKind] = None) -> None:
        """Remove overrides of one kind, or all of them.

        Args:
            kind: Kind to clear. Clears every override when omitted.
        """
        if kind is None:
            self._overrides.clear()
            return
        for key in [key for key in self._overrides if key[0] == kind]:
            del self._overrides[key]

    def _build(self, definition: Any) -> Any:
        if inspect.isclass(definition) or inspect.isroutine(definition):
            return self._injector.construct(definition).instance
        return definition

    def __len__(self) -> int:
        return len(self._overrides)
