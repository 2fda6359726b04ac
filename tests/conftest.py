from __future__ import annotations

import os

os.environ["LOGURU_LEVEL"] = "DEBUG"

import httpx
import pytest
from fastapi.testclient import TestClient
from mocks.alpha_vantage import MockAlphaVantage
from mocks.model import ScriptedModel, answer
from sse_starlette.sse import AppStatus

from finagent.app import app as APP
from finagent.config import Config, get_config
from finagent.llms.models import get_default_model
from finagent.market.client import AlphaVantageClient
from finagent.router.controller.chat import get_http_client
from finagent.tools.registry import ToolRegistry

TEST_CREDENTIALS = {
    "openai_api_key": "sk-test",
    "alpha_vantage_api_key": "av-test",
}


@pytest.fixture(autouse=True)
def reset_sse_app_status():
    # sse-starlette keeps an exit event bound to the first event loop it saw
    AppStatus.should_exit_event = None
    yield
    AppStatus.should_exit_event = None


@pytest.fixture
def config() -> Config:
    return Config(**TEST_CREDENTIALS, timeout=5.0)


@pytest.fixture
def mock_alpha_vantage() -> MockAlphaVantage:
    return MockAlphaVantage()


@pytest.fixture
def http_client(mock_alpha_vantage: MockAlphaVantage) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=mock_alpha_vantage.transport())


@pytest.fixture
def market_client(http_client: httpx.AsyncClient) -> AlphaVantageClient:
    return AlphaVantageClient(api_key="av-test", http_client=http_client)


@pytest.fixture
def registry(market_client: AlphaVantageClient) -> ToolRegistry:
    return ToolRegistry.for_client(market_client)


@pytest.fixture
def scripted_model() -> ScriptedModel:
    return answer("NVDA is trading at $137.71.")


@pytest.fixture
def app(config, scripted_model, http_client):
    # Dependencies injection mock
    APP.dependency_overrides = {
        get_config: lambda: config,
        get_default_model: lambda: scripted_model.model,
        get_http_client: lambda: http_client,
    }
    yield APP
    APP.dependency_overrides = {}


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
