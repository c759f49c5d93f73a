"""Shared fixtures: settings pointing at fake upstreams served by httpx.MockTransport."""

import httpx
import pytest
from fastapi.testclient import TestClient

from animal_facts import AnimalFactProcessor, ServiceConfig, Settings, create_app
from animal_facts.http_client import build_async_client

CAT_URL = "http://cat.test/facts/random?animal_type=cat"
DOG_URL = "http://dog.test/api/facts"

CAT_FACT = "Cats sleep for around thirteen to sixteen hours a day."
DOG_FACT = "A dog's nose print is unique, much like a person's fingerprint."


class FakeUpstream:
    """Routes requests by host and records every call it receives."""

    def __init__(self):
        self.calls: list[httpx.Request] = []
        self.responses = {
            "cat.test": lambda request: httpx.Response(200, json={"text": CAT_FACT}),
            "dog.test": lambda request: httpx.Response(200, json={"facts": [DOG_FACT]}),
        }

    def respond(self, host: str, handler):
        self.responses[host] = handler

    def calls_to(self, host: str) -> int:
        return sum(1 for request in self.calls if request.url.host == host)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        return self.responses[request.url.host](request)


@pytest.fixture
def test_settings():
    return Settings(
        cat_api_url=CAT_URL,
        dog_api_url=DOG_URL,
        cors_allow_origins=["http://localhost:8080"],
    )


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def http_client(test_settings, upstream):
    return build_async_client(test_settings, transport=httpx.MockTransport(upstream))


@pytest.fixture
def app(test_settings, http_client):
    processor = AnimalFactProcessor(test_settings, client=http_client)
    return create_app(
        processor,
        ServiceConfig(cors_allow_origins=test_settings.cors_allow_origins),
    )


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
