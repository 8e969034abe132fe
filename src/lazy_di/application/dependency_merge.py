"""Application layer - Module dependency inheritance."""

from typing import Any, Dict

from lazy_di.application.module import Module


class DependencyMerger:
    """Fills each module with the bindings of the modules it depends on.

    Inheritance is fill-only: a binding the module already has is never
    replaced. Each module is merged once; its dependency list is then rewritten
    in place from names to module objects.

    Attributes:
        _logger: Structured logger receiving unresolved module dependencies.
    """

    def __init__(self, logger: Any) -> None:
        """Initialize the merger.

        Args:
            logger: A structlog-style logger.
        """
        self._logger = logger

    def merge_all(self, modules: Dict[str, Module]) -> None:
        """Merge every module that has not been merged yet.

        Args:
            modules: The container's module table.
        """
        for module in list(modules.values()):
            self.merge(module, modules)

    def merge(self, module: Module, modules: Dict[str, Module]) -> None:
        """Merge a single module, merging its dependencies first.

        A missing dependency module is logged and skipped; its slot in the
        dependency list becomes ``None``.

        Args:
            module: The module to fill.
            modules: The container's module table.
        """
        if module.dependencies_initialized:
            return
        # Set before recursing so a cycle between modules terminates.
        module.dependencies_initialized = True

        resolved = []
        for dependency_name in module.dependencies:
            dependency = modules.get(dependency_name)
            if dependency is None:
                self._logger.error(
                    "unresolved_module_dependency",
                    dependency=dependency_name,
                    module=module.name,
                )
            else:
                self.merge(dependency, modules)
                _fill(module.values, dependency.values)
                _fill(module.services, dependency.services)
                _fill(module.factories, dependency.factories)
            resolved.append(dependency)

        module.dependencies[:] = resolved


def _fill(own: Dict[str, Any], inherited: Dict[str, Any]) -> None:
    for name, binding in inherited.items():
        own.setdefault(name, binding)
