"""
Session state machine and the controller that owns it.
"""
from .state import SessionState, Idle, Ready, Loading, Result, Failed, IDLE
from .controller import AnalysisController
from .controller_manager import SessionControllerManager

__all__ = [
    "SessionState",
    "Idle",
    "Ready",
    "Loading",
    "Result",
    "Failed",
    "IDLE",
    "AnalysisController",
    "SessionControllerManager",
]
