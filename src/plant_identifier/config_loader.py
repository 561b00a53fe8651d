"""
Configuration loader with validation.
"""
from dotenv import load_dotenv

from .config import PlantIdentifierConfig
from .config_validator import get_bool_env, get_float_env, get_optional_env
from .exceptions import ConfigurationError
from .messages import SUPPORTED_LOCALES

SUPPORTED_PROVIDERS = ("google", "openai", "groq")


def load_config_from_env(use_dotenv: bool = True) -> PlantIdentifierConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = PlantIdentifierApp(config)
        app.initialize()

    :param use_dotenv: Load a local .env file first (disable in production)
    :return: Validated PlantIdentifierConfig instance
    :raises: ConfigurationError if a value is invalid
    """
    if use_dotenv:
        load_dotenv()

    defaults = PlantIdentifierConfig()

    config = PlantIdentifierConfig(
        llm_provider=get_optional_env("LLM_PROVIDER", default=defaults.llm_provider).lower(),
        llm_model=get_optional_env("LLM_MODEL", default=defaults.llm_model),
        temperature=get_float_env("LLM_TEMPERATURE", defaults.temperature),
        request_timeout=get_float_env("LLM_REQUEST_TIMEOUT"),
        locale=get_optional_env("APP_LOCALE", default=defaults.locale).lower(),
        verbose=get_bool_env("VERBOSE", defaults.verbose),
    )

    if config.llm_provider not in SUPPORTED_PROVIDERS:
        raise ConfigurationError(
            f"LLM_PROVIDER must be one of {', '.join(SUPPORTED_PROVIDERS)}, "
            f"got {config.llm_provider!r}"
        )

    if config.locale not in SUPPORTED_LOCALES:
        raise ConfigurationError(
            f"APP_LOCALE must be one of {', '.join(SUPPORTED_LOCALES)}, "
            f"got {config.locale!r}"
        )

    return config
