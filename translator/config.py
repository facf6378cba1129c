from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

API_KEY_VAR = "AZURE_OPENAI_API_KEY"
ENDPOINT_VAR = "AZURE_OPENAI_ENDPOINT"
TARGET_LANGUAGE_VAR = "DEFAULT_TARGET_LANGUAGE"

DEFAULT_TARGET_LANGUAGE = "pt-br"


class ConfigError(ValueError):
    """Raised when required Azure OpenAI settings are missing."""


@dataclass(frozen=True)
class Settings:
    api_key: str
    endpoint: str
    default_target_language: str = DEFAULT_TARGET_LANGUAGE


def load_settings(env: Optional[Mapping[str, str]] = None, dotenv_path: Optional[str] = None) -> Settings:
    """Read the API key, endpoint and default target language.

    When `env` is not given, variables from a .env file are loaded first
    (already exported variables take precedence) and `os.environ` is used.

    Doxygen:
    - @param env: Mapping to read instead of the process environment.
    - @param dotenv_path: Explicit .env file; default searches upwards from cwd.
    - @return: Immutable `Settings`.
    - @throws ConfigError: If the API key or the endpoint is missing or empty.
    """
    if env is None:
        load_dotenv(dotenv_path=dotenv_path)
        env = os.environ

    api_key = (env.get(API_KEY_VAR) or "").strip()
    endpoint = (env.get(ENDPOINT_VAR) or "").strip()
    target = (env.get(TARGET_LANGUAGE_VAR) or "").strip() or DEFAULT_TARGET_LANGUAGE

    missing = [name for name, value in ((API_KEY_VAR, api_key), (ENDPOINT_VAR, endpoint)) if not value]
    if missing:
        raise ConfigError(f"API key or endpoint is not set in the environment variables: {', '.join(missing)}")

    return Settings(api_key=api_key, endpoint=endpoint.rstrip("/"), default_target_language=target)
