"""Integration tests for serving bindings through FastAPI."""

import pytest

pytest.importorskip("fastapi")

import httpx
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from lazy_di import BindingKind, inject
from lazy_di.infrastructure.fastapi_integration import (
    attach_container,
    create_fastapi_dependency,
    create_request_dependency,
    inject_bindings,
)
from lazy_di.infrastructure.testing import TestContainer


@inject("greeting")
class Greeter:
    def __init__(self, greeting):
        self.greeting = greeting

    def greet(self, name):
        return f"{self.greeting} {name}"


@pytest.fixture
def container():
    container = TestContainer()
    container.module("greetings").value("greeting", "ola").service("greeter", Greeter).factory(
        "request_context", lambda: {"id": id(object())}
    )
    return container


@pytest.fixture
def app(container):
    return attach_container(FastAPI(), container)


class TestFastAPIEndToEnd:
    """Test complete FastAPI request handling."""

    def test_module_dependency(self, app, container):
        """Test an endpoint depending on a module-bound service."""
        get_greeter = create_fastapi_dependency(container.module("greetings"), "greeter")

        @app.get("/greet/{name}")
        def greet(name: str, greeter=Depends(get_greeter)):
            return {"message": greeter.greet(name)}

        response = TestClient(app).get("/greet/ana")

        assert isinstance(response, httpx.Response)
        assert response.status_code == 200
        assert response.json() == {"message": "ola ana"}

    def test_request_dependency(self, app):
        """Test an endpoint resolving through the application's container."""
        get_greeting = create_request_dependency("greetings", "greeting", BindingKind.VALUE)

        @app.get("/greeting")
        def greeting(value: str = Depends(get_greeting)):
            return {"greeting": value}

        assert TestClient(app).get("/greeting").json() == {"greeting": "ola"}

    def test_inject_bindings_endpoint(self, app, container):
        """Test an async endpoint with injected bindings."""

        @app.get("/hello/{name}")
        @inject_bindings(container.module("greetings"), "greeter")
        async def hello(name: str, greeter):
            return {"message": greeter.greet(name)}

        response = TestClient(app).get("/hello/rui")

        assert response.status_code == 200
        assert response.json() == {"message": "ola rui"}

    def test_mocked_service_served(self, app, container):
        """Test that container mocks apply to requests."""
        get_greeter = create_fastapi_dependency(container.module("greetings"), "greeter")

        class MockGreeter:
            def greet(self, name):
                return f"mock {name}"

        @app.get("/greet/{name}")
        def greet(name: str, greeter=Depends(get_greeter)):
            return {"message": greeter.greet(name)}

        with container:
            container.set_mock_service("greeter", MockGreeter)
            assert TestClient(app).get("/greet/ana").json() == {"message": "mock ana"}

        assert TestClient(app).get("/greet/ana").json() == {"message": "ola ana"}

    def test_factory_fresh_per_request(self, app, container):
        """Test that a factory binding is constructed for each request."""
        get_context = create_fastapi_dependency(container.module("greetings"), "request_context", BindingKind.FACTORY)
        seen = []

        @app.get("/context")
        def context(ctx=Depends(get_context)):
            seen.append(ctx)
            return {}

        client = TestClient(app)
        client.get("/context")
        client.get("/context")

        assert len(seen) == 2
        assert seen[0] is not seen[1]
