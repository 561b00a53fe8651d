# src/plant_identifier/inference_factory.py
from typing import Optional

from .config import PlantIdentifierConfig
from .llm_factory import get_llm_instance
from .tools.llm_inference_client import LLMInferenceClient


def create_inference_client(
    config: Optional[PlantIdentifierConfig] = None,
) -> LLMInferenceClient:
    """
    Factory function to create a configured LLMInferenceClient.

    :param config: PlantIdentifierConfig instance (optional, uses defaults if not provided)
    :return: LLMInferenceClient wired to the configured chat model
    """
    if config is None:
        config = PlantIdentifierConfig()

    llm = get_llm_instance(
        provider=config.llm_provider,
        model=config.llm_model,
        temperature=config.temperature,
        timeout=config.request_timeout,
    )
    return LLMInferenceClient(llm=llm)
