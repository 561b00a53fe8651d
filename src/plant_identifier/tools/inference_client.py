from typing import Protocol

from ..schemas import PlantInfo


class InferenceClient(Protocol):
    """Protocol for the remote plant identification service."""

    async def identify(self, encoded_image: str, mime_type: str) -> PlantInfo:
        ...
