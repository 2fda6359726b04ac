from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from finagent.errors import CredentialMissingError

OPENAI_API_KEY = "OPENAI_API_KEY"
ALPHA_VANTAGE_API_KEY = "ALPHA_VANTAGE_API_KEY"


def get_config() -> Config:
    return Config()


class Config(BaseSettings):
    openai_api_key: str | None = Field(
        None, validation_alias=AliasChoices("finagent_openai_api_key", "openai_api_key")
    )
    alpha_vantage_api_key: str | None = Field(
        None, validation_alias=AliasChoices("finagent_alpha_vantage_api_key", "alpha_vantage_api_key")
    )

    model_name: str = Field("gpt-4o-mini", validation_alias=AliasChoices("finagent_model_name", "openai_model"))
    temperature: float = 0.3

    max_iterations: int = 10
    timeout: float = 30.0
    max_message_length: int = 500

    alpha_vantage_base_url: str = "https://www.alphavantage.co/query"
    http_timeout: float = 10.0

    sse_ping_interval: int = 60

    model_config = SettingsConfigDict(
        env_prefix="finagent_",
        case_sensitive=False,
        frozen=True,
        populate_by_name=True,
        protected_namespaces=(),
    )

    def require_credentials(self) -> None:
        if not self.openai_api_key:
            raise CredentialMissingError(OPENAI_API_KEY)
        if not self.alpha_vantage_api_key:
            raise CredentialMissingError(ALPHA_VANTAGE_API_KEY)
