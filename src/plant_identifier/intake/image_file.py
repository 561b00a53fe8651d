"""
Handle to a user-chosen image file.
"""
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class ImageFile:
    """
    A file picked by the user.

    No type or size checks happen here; the inference service decides
    what it accepts.
    """
    path: Path
    mime_type: str
    name: str

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        mime_type: Optional[str] = None,
        name: Optional[str] = None,
    ) -> "ImageFile":
        """
        Build a handle, guessing the media type from the file name.

        :param path: Location of the file on disk
        :param mime_type: Media type reported by the file picker, if any
        :param name: Display name (defaults to the file name)
        :return: ImageFile; mime_type is "" when it cannot be guessed
        """
        path = Path(path)
        display_name = name or path.name
        if not mime_type:
            guessed, _ = mimetypes.guess_type(display_name)
            mime_type = guessed or ""
        return cls(path=path, mime_type=mime_type, name=display_name)
