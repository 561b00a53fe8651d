"""
Session state as an explicit state machine value.

Each variant carries only the fields that make sense in it, so
combinations like "loading with an error" cannot be built.
"""
from dataclasses import dataclass, field
from typing import Optional, Union

from ..intake.image_file import ImageFile
from ..schemas import PlantInfo


class _BaseState:
    """Read-only view shared by every variant."""
    result: Optional[PlantInfo] = None
    error: Optional[str] = None
    is_loading: bool = False

    @property
    def has_image(self) -> bool:
        return self.image is not None


@dataclass(frozen=True)
class Idle(_BaseState):
    """No image selected."""
    image: None = field(default=None, init=False)
    preview: None = field(default=None, init=False)


@dataclass(frozen=True)
class Ready(_BaseState):
    """Image selected, not analyzed yet."""
    image: ImageFile
    preview: str


@dataclass(frozen=True)
class Loading(_BaseState):
    """Analysis in flight for the given generation."""
    image: ImageFile
    preview: str
    generation: int
    is_loading = True


@dataclass(frozen=True)
class Result(_BaseState):
    """Analysis succeeded."""
    image: ImageFile
    preview: str
    plant: PlantInfo

    @property
    def result(self) -> Optional[PlantInfo]:
        return self.plant


@dataclass(frozen=True)
class Failed(_BaseState):
    """Analysis failed; message is user-facing."""
    image: ImageFile
    preview: str
    message: str

    @property
    def error(self) -> Optional[str]:
        return self.message


SessionState = Union[Idle, Ready, Loading, Result, Failed]

IDLE = Idle()
