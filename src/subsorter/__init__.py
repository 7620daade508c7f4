"""
subsorter - Subtitle placement for movie and show libraries

Scans a media library, classifies each title folder as a movie, a show or a
show with season folders, and copies the matching English subtitle next to
every video under the video's base name.
"""

__version__ = "0.1.0"

from .core.library_walker import LibraryWalker
from .scanner.folder_classifier import FolderClassifier

__all__ = [
    "FolderClassifier",
    "LibraryWalker",
    "__version__",
]
