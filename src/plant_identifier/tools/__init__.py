from .inference_client import InferenceClient
from .llm_inference_client import LLMInferenceClient
from .output_parser import PlantInfoParser

__all__ = ["InferenceClient", "LLMInferenceClient", "PlantInfoParser"]
