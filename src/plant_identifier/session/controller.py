"""
Analysis workflow controller.

Owns the session state and drives intake -> encode -> infer -> display.
"""
import logging
from typing import Optional

from ..encoder import encode_image
from ..exceptions import EncodeError, InferenceError, ValidationError
from ..intake.image_file import ImageFile
from ..intake.preview_store import PreviewStore
from ..messages import Messages, get_messages
from ..tools.inference_client import InferenceClient
from .state import IDLE, Failed, Loading, Ready, Result, SessionState

logger = logging.getLogger(__name__)


class AnalysisController:
    """
    Single owner of a session's state.

    Every transition bumps a generation counter. An analysis remembers the
    generation it started in and drops its outcome if the counter moved
    while it was awaiting (reset or a new image), which is how a pending
    call gets ignored without being cancelled.

    Analysis starts only from Ready or Failed. All methods must be called
    from the event loop that runs analyze(); the controller is not
    thread-safe.
    """

    def __init__(
        self,
        inference_client: InferenceClient,
        preview_store: Optional[PreviewStore] = None,
        messages: Optional[Messages] = None,
    ):
        """
        :param inference_client: Client used to identify plants
        :param preview_store: Store for preview handles (a private one if omitted)
        :param messages: User-facing text bundle (Spanish if omitted)
        """
        self._client = inference_client
        self._previews = preview_store if preview_store is not None else PreviewStore()
        self._messages = messages or get_messages()
        self._state: SessionState = IDLE
        self._notice: Optional[str] = None
        self._generation = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def notice(self) -> Optional[str]:
        """Transient validation message, cleared by the next transition."""
        return self._notice

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def previews(self) -> PreviewStore:
        return self._previews

    def _transition(self, state: SessionState) -> None:
        logger.debug(
            f"Session transition {type(self._state).__name__} -> {type(state).__name__}"
        )
        self._state = state
        self._notice = None

    def _release_preview(self) -> None:
        if self._state.preview is not None:
            self._previews.release(self._state.preview)

    def select_image(self, image: ImageFile) -> SessionState:
        """
        Take a newly chosen image. Legal in every state.

        Any analysis still pending for the previous image is ignored
        when it resolves.
        """
        self._generation += 1
        self._release_preview()
        preview = self._previews.create(image)
        self._transition(Ready(image, preview))
        logger.info(f"Image selected: {image.name} ({image.mime_type or 'unknown type'})")
        return self._state

    def reset(self) -> SessionState:
        """Return to Idle unconditionally, even while loading."""
        self._generation += 1
        self._release_preview()
        self._transition(IDLE)
        logger.info("Session reset")
        return self._state

    def _require_image(self) -> ImageFile:
        image = self._state.image
        if image is None:
            raise ValidationError(self._messages.no_image_selected)
        return image

    async def analyze(self) -> SessionState:
        """
        Run one identification for the selected image.

        Without an image only the notice is set. While loading or with a
        result already shown nothing happens. Encode and inference
        failures end in Failed with the same generic message; the cause is
        logged. There is no retry.
        """
        try:
            image = self._require_image()
        except ValidationError as e:
            self._notice = str(e)
            logger.info("Analyze requested without an image")
            return self._state

        if self._state.is_loading:
            logger.warning("Analyze requested while an analysis is in flight; ignoring")
            return self._state

        if isinstance(self._state, Result):
            logger.warning("Analyze requested with a result on screen; reset or pick a new image first")
            return self._state

        self._generation += 1
        generation = self._generation
        preview = self._state.preview
        self._transition(Loading(image, preview, generation))

        try:
            encoded = await encode_image(image)
            plant = await self._client.identify(encoded, image.mime_type)
        except (EncodeError, InferenceError) as e:
            if self._is_stale(generation):
                return self._state
            logger.error(f"Plant analysis failed: {e}", exc_info=True)
            self._transition(Failed(image, preview, self._messages.analysis_failed))
            return self._state
        except Exception:
            if not self._is_stale(generation):
                self._transition(Failed(image, preview, self._messages.analysis_failed))
            raise

        if self._is_stale(generation):
            return self._state

        self._transition(Result(image, preview, plant))
        return self._state

    def _is_stale(self, generation: int) -> bool:
        if generation != self._generation:
            logger.info(f"Discarding outcome of stale analysis (generation {generation})")
            return True
        return False
