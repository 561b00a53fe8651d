"""
Image intake: file handles for user-chosen images and their preview handles.
"""
from .image_file import ImageFile
from .preview_store import PreviewStore

__all__ = ["ImageFile", "PreviewStore"]
