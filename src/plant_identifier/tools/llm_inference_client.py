from typing import Any
import logging

from langchain_core.messages import HumanMessage

from ..encoder import strip_data_url_prefix, to_data_url
from ..exceptions import InferenceError
from ..schemas import PlantInfo
from .inference_client import InferenceClient
from .output_parser import PlantInfoParser
from .prompts import IDENTIFY_PROMPT

logger = logging.getLogger(__name__)


class LLMInferenceClient(InferenceClient):
    """
    InferenceClient backed by a multimodal LangChain chat model.

    One request per call: the prompt and the image travel together in a
    single human message, and the reply goes through PlantInfoParser.
    """

    def __init__(self, llm: Any, prompt: str = IDENTIFY_PROMPT):
        """
        :param llm: LangChain chat model (anything with an async ``ainvoke``)
        :param prompt: Instruction text sent alongside the image
        """
        self.llm = llm
        self.prompt = prompt

    def build_message(self, encoded_image: str, mime_type: str) -> HumanMessage:
        return HumanMessage(
            content=[
                {"type": "text", "text": self.prompt},
                {
                    "type": "image_url",
                    "image_url": {"url": to_data_url(encoded_image, mime_type)},
                },
            ]
        )

    async def identify(self, encoded_image: str, mime_type: str) -> PlantInfo:
        """
        Identify the plant in an encoded image.

        :param encoded_image: Base64 payload; a data URL is reduced to its payload
        :param mime_type: Media type of the image, e.g. "image/jpeg"
        :return: Validated PlantInfo
        :raises InferenceError: On bad input, transport failure or invalid reply
        """
        encoded_image = strip_data_url_prefix(encoded_image or "")
        if not encoded_image:
            raise InferenceError("Encoded image is empty")
        if not mime_type:
            raise InferenceError("Image media type is unknown")

        message = self.build_message(encoded_image, mime_type)

        try:
            reply = await self.llm.ainvoke([message])
        except Exception as e:
            raise InferenceError(f"Inference request failed: {e}") from e

        content = getattr(reply, "content", reply)
        plant = PlantInfoParser.parse(content)
        logger.info(f"Identified plant: {plant.common_name} ({plant.scientific_name})")
        return plant
