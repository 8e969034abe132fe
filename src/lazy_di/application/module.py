from typing import Any, Callable, Dict, List, Optional, Sequence

from lazy_di.application.overrides import OverrideRegistry
from lazy_di.domain import (
    BindingKind,
    IBindingLookup,
    IContainer,
    IInjector,
    Injectable,
    InjectableItem,
)

_UNSET: Any = object()


class Module(IBindingLookup):
    """A named collection of value, service and factory bindings.

    Each accessor doubles as getter and setter: called with a name it reads the
    binding, called with a name and a definition it registers one. Reading any
    binding first makes sure the container's resolution pass has run.

    Bindings inherited from dependency modules are filled in by the container,
    never overwriting the module's own bindings.

    Attributes:
        dependencies: Names of modules to inherit from, replaced in place by the
            module objects (``None`` where missing) once merged.
        values: Value bindings by name.
        services: Service bindings by name.
        factories: Raw factory definitions by name.
        dependencies_initialized: Whether the inherited bindings were merged.

    Example:
        >>> module = container.module("greetings")
        >>> module.value("greeting", "ola").service("greeter", inject("greeting")(Greeter))
        >>> module.service("greeter").greeting
        'ola'
    """

    def __init__(
        self,
        name: str,
        dependencies: Optional[Sequence[str]],
        container: IContainer,
        overrides: OverrideRegistry,
        injector: IInjector,
    ) -> None:
        """Initialize a module without bindings.

        Args:
            name: The module name, unique within its container.
            dependencies: Names of modules whose bindings are inherited.
            container: The owning container.
            overrides: The container's mock bindings.
            injector: Constructs definitions.
        """
        self._name = name
        self._container = container
        self._overrides = overrides
        self._injector = injector

        self.dependencies: List[Any] = list(dependencies or [])
        self.values: Dict[str, InjectableItem] = {}
        self.services: Dict[str, InjectableItem] = {}
        self.factories: Dict[str, Any] = {}
        self.dependencies_initialized = False

    @property
    def name(self) -> str:
        return self._name

    def value(self, name: Optional[str] = None, definition: Any = _UNSET) -> Any:
        """Register or read a value.

        Plain data is returned as-is. An ``Injectable`` is constructed once with
        its dependencies and the result is kept.

        Args:
            name: The binding name. With no arguments the module is returned.
            definition: When given, registers the value and returns the module.

        Returns:
            The module when registering, otherwise the resolved value or
            ``None`` if nothing is bound under ``name``.
        """
        if name is None and definition is _UNSET:
            return self
        if definition is _UNSET:
            return self._get_value(name)
        self.values[name] = InjectableItem(name=name, definition=definition)
        return self

    def service(self, name: Optional[str] = None, definition: Any = _UNSET) -> Any:
        """Register or read a service.

        Services are always constructed, never returned raw, and the instance
        is shared by every read.

        Args:
            name: The binding name. With no arguments the module is returned.
            definition: When given, registers the service and returns the module.

        Returns:
            The module when registering, otherwise the service instance or
            ``None`` if nothing is bound under ``name``.
        """
        if name is None and definition is _UNSET:
            return self
        if definition is _UNSET:
            return self._get_service(name)
        self.services[name] = InjectableItem(name=name, definition=definition)
        return self

    def factory(self, name: Optional[str] = None, definition: Any = _UNSET) -> Any:
        """Register or read a factory.

        Every read constructs a new instance.

        Args:
            name: The binding name. With no arguments the module is returned.
            definition: When given, registers the factory and returns the module.

        Returns:
            The module when registering, otherwise a new instance or ``None``
            if nothing is bound under ``name``.
        """
        if name is None and definition is _UNSET:
            return self
        if definition is _UNSET:
            return self._get_factory(name)
        self.factories[name] = definition
        return self

    def has_binding(self, kind: BindingKind, name: str) -> bool:
        if self._overrides.contains(kind, name):
            return True
        if kind == BindingKind.MODULE:
            return name in self._container.modules
        return name in self._bindings(kind)

    def get(self, kind: BindingKind, name: str) -> Any:
        if kind == BindingKind.VALUE:
            return self._get_value(name)
        if kind == BindingKind.SERVICE:
            return self._get_service(name)
        if kind == BindingKind.FACTORY:
            return self._get_factory(name)
        if self._overrides.contains(kind, name):
            return self._overrides.get(kind, name)
        return self._container.modules.get(name)

    def binding_names(self, kind: BindingKind) -> List[str]:
        """Names bound in one namespace, in registration order."""
        return list(self._bindings(kind))

    def get_values(self) -> Dict[str, Any]:
        """Resolve every value binding."""
        return {name: self._get_value(name) for name in self.binding_names(BindingKind.VALUE)}

    def get_services(self) -> Dict[str, Any]:
        """Resolve every service binding."""
        return {name: self._get_service(name) for name in self.binding_names(BindingKind.SERVICE)}

    def get_factories(self) -> Dict[str, Any]:
        """Construct one instance of every factory binding."""
        return {name: self._get_factory(name) for name in self.binding_names(BindingKind.FACTORY)}

    def resolve_dependency(self, name: str) -> Any:
        """Resolve a name the way an injected dependency of this module would be.

        Raises:
            UnresolvableError: If nothing in this module or the container has that name.
        """
        self._container.ensure_resolved()
        return self._injector.find_dependency(name, self)

    def run(self, callback: Optional[Callable[[], Any]] = None) -> "Module":
        """Force the container's resolution pass, then invoke the callback."""
        self._container.run(callback)
        return self

    def _bindings(self, kind: BindingKind) -> Dict[str, Any]:
        if kind == BindingKind.VALUE:
            return self.values
        if kind == BindingKind.SERVICE:
            return self.services
        if kind == BindingKind.FACTORY:
            return self.factories
        raise ValueError(f"Modules do not hold {kind} bindings")

    def _get_value(self, name: str) -> Any:
        self._container.ensure_resolved()
        if self._overrides.contains(BindingKind.VALUE, name):
            return self._overrides.get(BindingKind.VALUE, name)

        item = self.values.get(name)
        if item is None:
            return None
        if not item.is_resolved:
            if isinstance(item.definition, Injectable):
                return item.memoize(self._injector.resolve(item.definition, self))
            return item.memoize(item.definition)
        return item.resolved_instance

    def _get_service(self, name: str) -> Any:
        self._container.ensure_resolved()
        if self._overrides.contains(BindingKind.SERVICE, name):
            return self._overrides.get(BindingKind.SERVICE, name)

        item = self.services.get(name)
        if item is None:
            return None
        if not item.is_resolved:
            return item.memoize(self._injector.resolve(item.definition, self))
        return item.resolved_instance

    def _get_factory(self, name: str) -> Any:
        self._container.ensure_resolved()
        if self._overrides.contains(BindingKind.FACTORY, name):
            return self._overrides.get(BindingKind.FACTORY, name)

        if name not in self.factories:
            return None
        return self._injector.resolve(self.factories[name], self)

    def __repr__(self) -> str:
        dependencies = [getattr(dependency, "name", dependency) for dependency in self.dependencies]
        return f"Module(name={self._name!r}, dependencies={dependencies!r})"
