"""Directory inspection for subsorter: video recognition and folder classification."""

from .extension_filter import create_video_extension_filter, is_video_file, strip_extension
from .folder_classifier import FolderClassifier

__all__ = [
    "FolderClassifier",
    "create_video_extension_filter",
    "is_video_file",
    "strip_extension",
]
