"""
Session controller manager.

Keeps one AnalysisController per UI session.
"""
from typing import Callable, Dict

from .controller import AnalysisController


class SessionControllerManager:
    """
    Manages controllers per session ID.

    Each browser session gets its own state; nothing is shared between them.
    """

    def __init__(self, factory: Callable[[], AnalysisController]):
        """
        :param factory: Builds a fresh controller for a new session
        """
        self._factory = factory
        self._controllers: Dict[str, AnalysisController] = {}

    def get_controller(self, session_id: str) -> AnalysisController:
        """
        Get or create the controller for a session.

        :param session_id: Session identifier
        :return: AnalysisController instance
        """
        if session_id not in self._controllers:
            self._controllers[session_id] = self._factory()
        return self._controllers[session_id]

    def clear_controller(self, session_id: str) -> None:
        """Reset and forget a session's controller."""
        controller = self._controllers.pop(session_id, None)
        if controller is not None:
            controller.reset()

    def clear_all(self) -> None:
        for controller in self._controllers.values():
            controller.reset()
        self._controllers.clear()

    def __len__(self) -> int:
        return len(self._controllers)
