import inspect
from types import SimpleNamespace
from typing import Any, List, Sequence, Tuple

from lazy_di.domain import (
    BindingKind,
    ConstructedInstance,
    ConstructionError,
    DIException,
    IBindingLookup,
    IInjector,
    Injectable,
    InvalidDefinitionError,
    Resolution,
    ReturnedObject,
    UnresolvableError,
)

# Return values of these types never replace the constructed object.
PRIMITIVE_TYPES: Tuple[type, ...] = (type(None), bool, int, float, complex, str, bytes)

SEARCH_ORDER: Tuple[BindingKind, ...] = (
    BindingKind.VALUE,
    BindingKind.SERVICE,
    BindingKind.FACTORY,
    BindingKind.MODULE,
)


class Injector(IInjector):
    """Constructs definitions after resolving their declared dependency names.

    Dependency names are looked up in values, then services, then factories,
    then modules. A dependency that is itself an ``Injectable`` is resolved
    recursively against the same lookup.
    """

    def resolve(self, definition: Any, lookup: IBindingLookup) -> Any:
        """Resolve all declared dependencies and construct the definition.

        Args:
            definition: A plain class or function, or an ``Injectable``.
            lookup: The module the dependencies are resolved against.

        Returns:
            The effective instance (see :meth:`construct`).

        Raises:
            UnresolvableError: If a dependency name cannot be found.
            InvalidDefinitionError: If the definition is not callable.
            ConstructionError: If the definition raised while being constructed.

        Example:
            >>> @inject("greeting")
            ... class Greeter:
            ...     def __init__(self, greeting):
            ...         self.greeting = greeting
            >>>
            >>> injector = Injector()
            >>> greeter = injector.resolve(Greeter, module)
        """
        if isinstance(definition, Injectable):
            args = self.find_dependencies(definition, lookup)
            return self.construct(definition.definition, args).instance
        return self.construct(definition).instance

    def find_dependencies(self, injectable: Injectable, lookup: IBindingLookup) -> List[Any]:
        """Resolve every dependency name of an injectable, in declared order."""
        return [self.find_dependency(name, lookup) for name in injectable.dependencies]

    def find_dependency(self, name: str, lookup: IBindingLookup) -> Any:
        """Find a single dependency by name.

        Args:
            name: The dependency name.
            lookup: The module the name is resolved against.

        Returns:
            The resolved dependency.

        Raises:
            UnresolvableError: If no value, service, factory or module has that name.
        """
        for kind in SEARCH_ORDER:
            if lookup.has_binding(kind, name):
                item = lookup.get(kind, name)
                break
        else:
            raise UnresolvableError(name, lookup.name)

        if isinstance(item, Injectable):
            item = self.resolve(item, lookup)
        return item

    def construct(self, target: Any, args: Sequence[Any] = ()) -> Resolution:
        """Invoke a class or function with positional arguments.

        A class is instantiated and the instance is used. A function is called;
        if it returns an object, that object is used, otherwise a blank object
        stands in for the constructed instance.

        Args:
            target: The class or function to invoke.
            args: Positional arguments, in declared order.

        Returns:
            ``ConstructedInstance`` or ``ReturnedObject``.

        Raises:
            InvalidDefinitionError: If the target is not callable.
            ConstructionError: If the target raised a non-DI exception.
        """
        if not callable(target):
            raise InvalidDefinitionError(target, "definition is not callable")

        try:
            if inspect.isclass(target):
                return ConstructedInstance(instance=target(*args))

            returned = target(*args)
        except (DIException, RecursionError):
            raise
        except Exception as e:
            raise ConstructionError(target, str(e)) from e

        if isinstance(returned, PRIMITIVE_TYPES):
            return ConstructedInstance(instance=SimpleNamespace())
        return ReturnedObject(instance=returned)
