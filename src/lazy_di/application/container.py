from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional

from lazy_di.application.dependency_merge import DependencyMerger
from lazy_di.application.injector import Injector
from lazy_di.application.module import Module
from lazy_di.application.overrides import OverrideRegistry
from lazy_di.domain import (
    BindingKind,
    DIException,
    DuplicateModuleError,
    IContainer,
    ResolutionState,
)
from lazy_di.infrastructure.logging import LoggingConfig, create_logger
from lazy_di.infrastructure.scheduling import Scheduler, call_soon


class Container(IContainer):
    """Main dependency injection container.

    Owns the module table and the container-wide mocks. Registering modules
    and bindings constructs nothing; the resolution pass (merge inherited
    bindings, then construct every binding of every module) runs once, on the
    first read, on :meth:`run`, or when the scheduled callback fires,
    whichever comes first.

    Attributes:
        _modules: Dictionary mapping module names to modules.
        _injector: Component constructing definitions.
        _overrides: Container-wide mock bindings.
        _merger: Component filling modules with inherited bindings.
        _scheduler: Defers the automatic resolution pass.
        _logger: Structured logger for recovered errors.
        _state: Whether the pass ran since the last module registration.

    Example:
        >>> container = Container()
        >>> container.module("greetings").value("greeting", "ola")
        >>> container.module("app", ["greetings"])
        >>> container.module("app").value("greeting")
        'ola'
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        logger: Optional[Any] = None,
        logging_config: Optional[LoggingConfig] = None,
    ) -> None:
        """Initialize an empty container.

        Args:
            scheduler: Defers a callback until the current synchronous work is
                done. Defaults to :func:`call_soon`.
            logger: Structlog-style logger. Built from ``logging_config`` when
                not provided.
            logging_config: Configuration used to build the default logger.
        """
        self._modules: Dict[str, Module] = {}
        self._injector = Injector()
        self._overrides = OverrideRegistry(self._injector)
        self._scheduler: Scheduler = scheduler if callable(scheduler) else call_soon
        self._logger = logger if logger is not None else create_logger(logging_config)
        self._merger = DependencyMerger(self._logger)
        self._state = ResolutionState.PENDING

    @property
    def modules(self) -> Dict[str, Module]:
        return self._modules

    @property
    def state(self) -> ResolutionState:
        return self._state

    @property
    def overrides(self) -> OverrideRegistry:
        return self._overrides

    @property
    def logger(self) -> Any:
        return self._logger

    def module(self, name: str, dependencies: Optional[List[str]] = None) -> Any:
        """Register a new module or return an existing one.

        Args:
            name: The module name.
            dependencies: Names of modules whose bindings are inherited.

        Returns:
            The module, or the mock registered for ``name``.

        Raises:
            DuplicateModuleError: If ``name`` exists and a dependency list is given.

        Example:
            >>> container.module("database", ["server"]).value("port", 5432)
        """
        if self._overrides.contains(BindingKind.MODULE, name):
            return self._overrides.get(BindingKind.MODULE, name)

        if name in self._modules:
            if dependencies is not None:
                raise DuplicateModuleError(name)
            return self._modules[name]

        module = Module(name, dependencies, self, self._overrides, self._injector)
        self._modules[name] = module
        self._state = ResolutionState.PENDING
        self._logger.debug("module_registered", module=name, dependencies=list(module.dependencies))
        self._scheduler(self.ensure_resolved)
        return module

    def ensure_resolved(self) -> None:
        """Run the merge and resolve pass unless it already ran.

        Every read, :meth:`run` and the scheduled callback go through here.
        Failures while eagerly constructing bindings are logged, not raised;
        the failing binding stays unresolved and raises when read directly.
        """
        if self._state == ResolutionState.RESOLVED:
            return
        self._state = ResolutionState.RESOLVED

        self._logger.debug("resolution_pass_started", modules=len(self._modules))
        self._merger.merge_all(self._modules)
        for module in list(self._modules.values()):
            self._resolve_module(module)
        self._logger.debug("resolution_pass_finished", modules=len(self._modules))

    def _resolve_module(self, module: Module) -> None:
        for kind in (BindingKind.VALUE, BindingKind.SERVICE, BindingKind.FACTORY):
            for name in module.binding_names(kind):
                try:
                    module.get(kind, name)
                except DIException as e:
                    self._logger.error(
                        "binding_resolution_failed",
                        module=module.name,
                        kind=str(kind),
                        binding=name,
                        error=str(e),
                    )

    def run(self, callback: Optional[Callable[[], Any]] = None) -> "Container":
        """Force the resolution pass, then invoke the callback.

        Args:
            callback: Called after the pass, even when it had already run.

        Returns:
            The container.
        """
        self.ensure_resolved()
        if callable(callback):
            callback()
        return self

    def set_mock_module(self, name: str, definition: Any) -> Any:
        """Return ``definition`` instead of the module ``name`` from now on."""
        return self._set_mock(BindingKind.MODULE, name, definition)

    def set_mock_value(self, name: str, definition: Any) -> Any:
        """Return ``definition`` for every read of the value ``name``."""
        return self._set_mock(BindingKind.VALUE, name, definition)

    def set_mock_service(self, name: str, definition: Any) -> Any:
        """Construct ``definition`` once and return it for every read of the service ``name``.

        Returns:
            The constructed mock instance.
        """
        return self._set_mock(BindingKind.SERVICE, name, definition)

    def set_mock_factory(self, name: str, definition: Any) -> Any:
        """Construct ``definition`` anew for every read of the factory ``name``.

        Returns:
            One freshly constructed mock instance.
        """
        return self._set_mock(BindingKind.FACTORY, name, definition)

    def clear_mocks(self) -> None:
        """Remove every mock, restoring the real bindings."""
        self._overrides.clear()

    def _set_mock(self, kind: BindingKind, name: str, definition: Any) -> Any:
        self._logger.debug("mock_registered", kind=str(kind), name=name)
        return self._overrides.set(kind, name, definition)


@lru_cache(maxsize=None)
def default_container() -> Container:
    """Return the process-wide container, creating it on first use."""
    return Container()
