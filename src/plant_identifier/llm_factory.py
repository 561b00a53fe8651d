import logging
from typing import Any, Optional

from .config_validator import get_required_env

try:
    from langchain_google_genai import ChatGoogleGenerativeAI
except ImportError:
    ChatGoogleGenerativeAI = None

try:
    from langchain_openai import ChatOpenAI
except ImportError:
    ChatOpenAI = None

try:
    from langchain_groq import ChatGroq
except ImportError:
    ChatGroq = None

logger = logging.getLogger(__name__)

# Groq only serves a few multimodal models
KNOWN_GROQ_VISION_MODELS = [
    "meta-llama/llama-4-scout-17b-16e-instruct",
    "meta-llama/llama-4-maverick-17b-128e-instruct",
]


def get_llm_instance(
    provider: str,
    model: str,
    temperature: float = 0.2,
    timeout: Optional[float] = None,
) -> Any:
    """
    Factory to return a ready-to-use multimodal chat model based on provider name.

    :param provider: 'google', 'openai' or 'groq'
    :param model: Model name
    :param temperature: Sampling temperature
    :param timeout: Request timeout in seconds (None keeps the client default)
    :return: LangChain chat model instance
    """
    provider = provider.lower()

    if provider == "google":
        if ChatGoogleGenerativeAI is None:
            raise ImportError(
                "langchain_google_genai not installed. "
                "Install with: pip install langchain-google-genai"
            )
        api_key = get_required_env(
            "GOOGLE_API_KEY",
            description="Google AI Studio API key (get from https://aistudio.google.com/app/apikey)"
        )
        return ChatGoogleGenerativeAI(
            model=model,
            google_api_key=api_key,
            temperature=temperature,
            timeout=timeout,
        )

    elif provider == "openai":
        if ChatOpenAI is None:
            raise ImportError(
                "langchain_openai not installed. "
                "Install with: pip install langchain-openai"
            )
        api_key = get_required_env(
            "OPENAI_API_KEY",
            description="OpenAI API key (get from https://platform.openai.com/api-keys)"
        )
        return ChatOpenAI(
            model=model,
            api_key=api_key,
            temperature=temperature,
            timeout=timeout,
        )

    elif provider == "groq":
        if ChatGroq is None:
            raise ImportError(
                "langchain_groq not installed. "
                "Install with: pip install langchain-groq"
            )
        api_key = get_required_env(
            "GROQ_API_KEY",
            description="Groq API key (get from https://console.groq.com/keys)"
        )

        if model not in KNOWN_GROQ_VISION_MODELS:
            # Groq adds models often, so only warn
            logger.warning(
                f"Model '{model}' not in known Groq vision models. "
                f"Known models: {KNOWN_GROQ_VISION_MODELS}"
            )

        return ChatGroq(
            model=model,
            api_key=api_key,
            temperature=temperature,
            timeout=timeout,
        )

    else:
        raise ValueError(f"Unknown LLM provider: {provider}")
