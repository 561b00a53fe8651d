"""
Public application facade for the plant identifier.

Single stable entry point: wires configuration, the chat model and the
inference client, and hands out per-session controllers.
"""
import logging
from typing import Optional

from .config import PlantIdentifierConfig
from .encoder import encode_image
from .exceptions import AppNotInitializedError
from .inference_factory import create_inference_client
from .intake.image_file import ImageFile
from .intake.preview_store import PreviewStore
from .messages import Messages, get_messages
from .schemas import PlantInfo
from .session.controller import AnalysisController
from .tools.inference_client import InferenceClient

logger = logging.getLogger(__name__)


class PlantIdentifierApp:
    """
    Public application facade.

    Usage:
        config = load_config_from_env()
        app = PlantIdentifierApp(config)
        app.initialize()
        controller = app.create_controller()
    """

    def __init__(self, config: PlantIdentifierConfig):
        """
        :param config: PlantIdentifierConfig instance
        """
        self._config = config
        self._client: Optional[InferenceClient] = None
        self._messages: Messages = get_messages(config.locale)

    @property
    def config(self) -> PlantIdentifierConfig:
        return self._config

    @property
    def messages(self) -> Messages:
        return self._messages

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    def initialize(self, inference_client: Optional[InferenceClient] = None) -> None:
        """
        Build the inference client. Safe to call more than once.

        :param inference_client: Pre-built client (skips the LLM factory)
        """
        if self._client is not None:
            return

        if inference_client is None:
            inference_client = create_inference_client(self._config)
            logger.info(
                f"Inference client ready - provider: {self._config.llm_provider}, "
                f"model: {self._config.llm_model}"
            )
        self._client = inference_client

    def _require_client(self) -> InferenceClient:
        if self._client is None:
            raise AppNotInitializedError("App not initialized. Call initialize() first.")
        return self._client

    def create_controller(self, preview_store: Optional[PreviewStore] = None) -> AnalysisController:
        """Create a controller for one UI session."""
        return AnalysisController(
            inference_client=self._require_client(),
            preview_store=preview_store,
            messages=self._messages,
        )

    async def identify(self, image: ImageFile) -> PlantInfo:
        """
        One-shot identification outside any session.

        Errors propagate as EncodeError or InferenceError.
        """
        client = self._require_client()
        encoded = await encode_image(image)
        return await client.identify(encoded, image.mime_type)
