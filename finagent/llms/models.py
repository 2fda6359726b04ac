from __future__ import annotations

from fastapi import Depends
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings

from finagent.config import OPENAI_API_KEY, Config, get_config
from finagent.errors import CredentialMissingError


def init_model(config: Config) -> Model:
    if not config.openai_api_key:
        raise CredentialMissingError(OPENAI_API_KEY)
    return OpenAIChatModel(
        config.model_name,
        provider=OpenAIProvider(api_key=config.openai_api_key),
    )


def get_model_settings(config: Config) -> ModelSettings:
    return ModelSettings(temperature=config.temperature)


def get_default_model(config: Config = Depends(get_config)) -> Model | None:
    # A missing key is reported per request by the controller
    if not config.openai_api_key:
        return None
    return init_model(config)
