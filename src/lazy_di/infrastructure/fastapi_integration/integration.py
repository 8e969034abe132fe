import functools
import inspect
from typing import Any, Callable, Dict, TypeVar

from fastapi import FastAPI, Request

from lazy_di.application import Container, Module
from lazy_di.domain import BindingKind, UnresolvableError

F = TypeVar("F", bound=Callable[..., Any])


def create_fastapi_dependency(
    module: Module,
    name: str,
    kind: BindingKind = BindingKind.SERVICE,
) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that reads a binding from a module.

    The binding keeps its own semantics: a service is shared, a factory is
    constructed for every request, and container mocks apply.

    Args:
        module: The module the binding is read from.
        name: The binding name.
        kind: Which namespace to read. Defaults to services.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> database = container.module("database").service("repository", UserRepository)
        >>> get_repository = create_fastapi_dependency(database, "repository")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_repository)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Read the binding from the module."""
        return module.get(kind, name)

    return dependency


def inject_bindings(module: Module, *names: str) -> Callable[[F], F]:
    """Decorator that fills the named parameters of an endpoint from a module.

    Each name is resolved the way an injected dependency would be: values,
    then services, then factories, then modules. Arguments passed explicitly
    are left alone. The injected parameters are removed from the visible
    signature so FastAPI does not treat them as request parameters.

    Args:
        module: The module the names are resolved against.
        *names: Parameter names to inject.

    Returns:
        A decorator function.

    Example:
        >>> @app.get("/greeting")
        >>> @inject_bindings(greetings, "greeter")
        >>> async def greet(greeter):
        ...     return {"message": greeter.greet()}
    """

    def decorator(func: F) -> F:
        """Wrap the function with binding injection."""
        signature = inspect.signature(func)
        visible = [param for param_name, param in signature.parameters.items() if param_name not in names]

        def resolve(kwargs: Dict[str, Any]) -> Dict[str, Any]:
            for name in names:
                if name not in kwargs:
                    kwargs[name] = module.resolve_dependency(name)
            return kwargs

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                return await func(*args, **resolve(kwargs))

            wrapper: Any = async_wrapper
        else:

            @functools.wraps(func)
            def sync_wrapper(*args, **kwargs):
                return func(*args, **resolve(kwargs))

            wrapper = sync_wrapper

        wrapper.__signature__ = signature.replace(parameters=visible)
        return wrapper

    return decorator


def attach_container(app: FastAPI, container: Container) -> FastAPI:
    """Make a container reachable from every request of an application.

    The container is stored as ``app.state.di_container`` and its resolution
    pass is forced, so bindings are constructed before the first request.

    Args:
        app: The FastAPI application.
        container: The container holding the application's modules.

    Returns:
        The application.
    """
    app.state.di_container = container
    container.run()
    return app


def create_request_dependency(
    module_name: str,
    name: str,
    kind: BindingKind = BindingKind.SERVICE,
) -> Callable[[Request], Any]:
    """Create a FastAPI dependency reading a binding from the app's container.

    Requires :func:`attach_container` to have been called on the application.
    The module must already be registered (or mocked); an unknown module name
    raises ``UnresolvableError`` when the dependency is called.

    Args:
        module_name: The module the binding is read from.
        name: The binding name.
        kind: Which namespace to read. Defaults to services.

    Returns:
        A callable that resolves from the request's application container.

    Example:
        >>> attach_container(app, container)
        >>> get_repository = create_request_dependency("database", "repository")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo=Depends(get_repository)):
        ...     return await repo.get_all()
    """

    def request_dependency(request: Request) -> Any:
        """Read the binding from the application's container."""
        container = getattr(request.app.state, "di_container", None)
        if container is None:
            raise RuntimeError("Application does not have a DI container. Did you forget to call attach_container?")
        # Never register modules while serving a request.
        if container.overrides.contains(BindingKind.MODULE, module_name):
            module = container.overrides.get(BindingKind.MODULE, module_name)
        else:
            module = container.modules.get(module_name)
        if module is None:
            raise UnresolvableError(module_name)
        return module.get(kind, name)

    return request_dependency
