"""
View model for the single analysis page.

render() is a pure function of the session state: the page shows exactly
one of prompt, ready, loading, result or failed.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..messages import Messages, get_messages
from ..schemas import PlantInfo
from ..session.state import SessionState


class ViewKind(Enum):
    PROMPT = "prompt"
    READY = "ready"
    LOADING = "loading"
    RESULT = "result"
    FAILED = "failed"


@dataclass(frozen=True)
class View:
    kind: ViewKind
    heading: Optional[str] = None
    preview: Optional[str] = None
    show_uploader: bool = True
    show_analyze: bool = False
    show_spinner: bool = False
    show_reset: bool = False
    error_message: Optional[str] = None
    plant: Optional[PlantInfo] = None

    @property
    def show_heading(self) -> bool:
        return self.heading is not None

    @property
    def show_result(self) -> bool:
        return self.plant is not None


def view_kind(state: SessionState) -> ViewKind:
    if state.is_loading:
        return ViewKind.LOADING
    if state.result is not None:
        return ViewKind.RESULT
    if state.error is not None:
        return ViewKind.FAILED
    if state.has_image:
        return ViewKind.READY
    return ViewKind.PROMPT


def render(
    state: SessionState,
    notice: Optional[str] = None,
    messages: Optional[Messages] = None,
) -> View:
    """
    Map session state to the view to display.

    :param state: Current session state
    :param notice: Transient validation message; shown in the error slot
    :param messages: Text bundle for the heading
    :return: View with at most one of spinner, error or result visible
    """
    messages = messages or get_messages()
    kind = view_kind(state)

    if kind is ViewKind.LOADING:
        return View(kind=kind, preview=state.preview, show_spinner=True)

    if kind is ViewKind.RESULT:
        return View(
            kind=kind,
            preview=state.preview,
            show_reset=True,
            plant=state.result,
        )

    if kind is ViewKind.FAILED:
        return View(
            kind=kind,
            preview=state.preview,
            show_analyze=True,
            error_message=state.error,
        )

    if kind is ViewKind.READY:
        return View(
            kind=kind,
            preview=state.preview,
            show_analyze=True,
            error_message=notice,
        )

    return View(kind=kind, heading=messages.heading, error_message=notice)
