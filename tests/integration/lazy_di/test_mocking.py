"""Integration tests for container-wide mocks."""

from unittest.mock import MagicMock

import pytest

from lazy_di import inject
from lazy_di.infrastructure.testing import MockBindings, TestContainer


@pytest.fixture
def container():
    return TestContainer()


class SlowServer:
    def __init__(self):
        self.name = "slow server"


@inject("serverconnector")
class SlowDBConnector:
    def __init__(self, server):
        self.server = server


class FastServer:
    def __init__(self):
        self.name = "Mock "


@inject("serverconnector")
class FastDBConnector:
    def __init__(self, server):
        server.name += "faster"
        self.server = server


class TestMockingThroughModules:
    """Test replacing slow parts of an application."""

    def test_override_dependencies_in_a_test_module(self, container):
        """Test that a test module can swap services its dependencies use."""
        container.module("server").service("serverconnector", SlowServer)
        database = container.module("database", ["server"]).value("port", "realportnumber").service(
            "dbconnector", SlowDBConnector
        )

        assert database.service("dbconnector").server.name == "slow server"

        test_app = (
            container.module("TestApp", ["database"])
            .service("serverconnector", FastServer)
            .service("dbconnector", FastDBConnector)
        )

        assert test_app.service("dbconnector").server.name == "Mock faster"
        assert test_app.value("port") == "realportnumber"

    def test_mock_service_reaches_nested_dependencies(self, container):
        """Test that a mocked name is used at every depth of resolution."""
        container.module("server").service("serverconnector", SlowServer)
        database = container.module("database", ["server"]).service("dbconnector", SlowDBConnector)
        container.set_mock_service("serverconnector", FastServer)

        assert database.service("dbconnector").server.name == "Mock "

    def test_mock_applies_to_every_module(self, container):
        """Test that a mock shadows the name in unrelated modules too."""
        first = container.module("first").value("PORT", "1")
        second = container.module("second").value("PORT", "2")
        inheriting = container.module("third", ["first"])

        container.set_mock_value("PORT", "9999")

        assert first.value("PORT") == second.value("PORT") == inheriting.value("PORT") == "9999"


class TestMockKinds:
    """Test mocking each kind of binding."""

    def test_mock_whole_module(self, container):
        """Test that a mocked module replaces the real one."""
        module = container.module("RealModule")
        container.set_mock_module("RealModule", {"mock": "mock"})

        mock = container.module("RealModule")

        assert module is not mock
        assert mock == {"mock": "mock"}

    def test_mocked_module_is_injected(self, container):
        """Test that injecting a module name yields the mock."""
        container.module("RealModule")
        container.set_mock_module("RealModule", {"mock": "mock"})
        module = container.module("app").service("uses", inject("RealModule")(lambda real: {"real": real}))

        assert module.service("uses") == {"real": {"mock": "mock"}}

    def test_mock_value(self, container):
        """Test that a mocked value replaces the real one."""
        module = container.module("RealModule").value("PORT", "8080")

        container.set_mock_value("PORT", "9999")

        assert module.value("PORT") == "9999"

    def test_mock_service_after_real_resolution(self, container):
        """Test that a mock replaces an already memoized real service."""

        def real_service():
            return {"value": "REAL SERVICE"}

        def mock_service():
            return {"value": "MOCK SERVICE"}

        module = container.module("RealModule").service("SERVICE", real_service)
        assert module.service("SERVICE") == {"value": "REAL SERVICE"}

        container.set_mock_service("SERVICE", mock_service)

        assert module.service("SERVICE") == {"value": "MOCK SERVICE"}
        assert module.service("SERVICE") is module.service("SERVICE")

    def test_mock_factory(self, container):
        """Test that a mocked factory is constructed on every read."""

        def real_factory():
            return {"value": "REAL FACTORY"}

        def mock_factory():
            return {"value": "MOCK FACTORY"}

        module = container.module("RealModule").factory("FACTORY", real_factory)
        assert module.factory("FACTORY") == {"value": "REAL FACTORY"}

        mock = container.set_mock_factory("FACTORY", mock_factory)

        assert mock == {"value": "MOCK FACTORY"}
        assert mock == module.factory("FACTORY")
        assert module.factory("FACTORY") is not module.factory("FACTORY")

    def test_mock_satisfies_missing_dependency(self, container):
        """Test that a mocked name never fails to resolve."""
        module = container.module("app").service("greeter", inject("greeting")(lambda greeting: {"g": greeting}))

        container.set_mock_value("greeting", "ola")

        assert module.service("greeter") == {"g": "ola"}

    def test_mock_bindings_restore_real_service(self, container):
        """Test that leaving a MockBindings block restores the memoized real service."""
        module = container.module("app").service("SERVICE", lambda: {"value": "REAL"})
        real = module.service("SERVICE")

        with MockBindings(container, services={"SERVICE": lambda: {"value": "MOCK"}}):
            assert module.service("SERVICE") == {"value": "MOCK"}

        assert module.service("SERVICE") is real

    def test_configured_test_double_is_injected_as_is(self, container):
        """Test that a configured MagicMock service mock reaches dependents unchanged."""
        container.module("server").service("serverconnector", SlowServer)
        database = container.module("database", ["server"]).service("dbconnector", SlowDBConnector)
        fake = MagicMock()
        fake.name = "fake server"

        assert container.set_mock_service("serverconnector", fake) is fake
        assert database.service("dbconnector").server is fake
        assert database.service("dbconnector").server.name == "fake server"
        fake.assert_not_called()
