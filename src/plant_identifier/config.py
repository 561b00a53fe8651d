from dataclasses import dataclass
from typing import Optional


@dataclass
class PlantIdentifierConfig:
    # LLM / inference
    llm_provider: str = "google"
    llm_model: str = "gemini-2.5-flash"
    temperature: float = 0.2
    request_timeout: Optional[float] = None

    # UI
    locale: str = "es"

    # Logging
    verbose: bool = False
