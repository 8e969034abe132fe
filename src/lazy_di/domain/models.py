from typing import Any, Callable, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class Injectable(BaseModel):
    """Descriptor pairing a constructible definition with its dependency names.

    The dependency names are resolved in order and passed positionally to the
    definition when it is constructed.

    Attributes:
        definition: Class or function to construct.
        dependencies: Ordered names of the bindings the definition needs.

    Example:
        >>> class Greeter:
        ...     def __init__(self, greeting):
        ...         self.greeting = greeting
        >>> Injectable(definition=Greeter, dependencies=("greeting",))
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    definition: Callable[..., Any] = Field(..., description="The class or function to construct.")
    dependencies: Tuple[str, ...] = Field(
        default=(),
        description="Ordered names of the bindings injected into the definition.",
    )


def inject(*dependencies: str) -> Callable[[Callable[..., Any]], Injectable]:
    """Decorator that turns a class or function into an :class:`Injectable`.

    Example:
        >>> @inject("greeting")
        ... class Greeter:
        ...     def __init__(self, greeting):
        ...         self.greeting = greeting
    """

    def decorator(definition: Callable[..., Any]) -> Injectable:
        return Injectable(definition=definition, dependencies=dependencies)

    return decorator


class InjectableItem(BaseModel):
    """A named binding whose construction is delayed until it is read.

    Attributes:
        name: The binding name.
        definition: Plain value, class, function or :class:`Injectable`.
        resolved_instance: Memoized result once resolved.
        is_resolved: Whether ``resolved_instance`` holds a result.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(..., description="The name the binding is registered under.")
    definition: Any = Field(..., description="The raw definition of the binding.")
    resolved_instance: Optional[Any] = Field(
        default=None,
        description="Memoized instance after the first successful resolution.",
    )
    is_resolved: bool = Field(
        default=False,
        description="Whether the binding has been resolved.",
    )

    def memoize(self, instance: Any) -> Any:
        """Store the resolved instance, keeping the first one if already resolved.

        Args:
            instance: The freshly resolved instance.

        Returns:
            The memoized instance.
        """
        if not self.is_resolved:
            self.resolved_instance = instance
            self.is_resolved = True
        return self.resolved_instance


class ConstructedInstance(BaseModel):
    """Result of a construction where the constructed object itself is used."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    instance: Any = Field(..., description="The constructed object.")


class ReturnedObject(BaseModel):
    """Result of a construction where the definition returned an object to use instead."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    instance: Any = Field(..., description="The object returned by the definition.")


Resolution = Union[ConstructedInstance, ReturnedObject]
