from .file_loader import FileLoader
from .language_selector import LanguageSelector
from .navigator import FallbackNavigator

__all__ = [
    "FallbackNavigator",
    "FileLoader",
    "LanguageSelector",
]
