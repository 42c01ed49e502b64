"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the navigation core and the external
services it drives: map providers, the language model, the browser and
the speech recognizer.
"""

from .browser import BrowserLauncherPort
from .llm import TextCompletionPort
from .places import PlaceResolverPort
from .speech import SpeechRecognizerPort

__all__ = [
    "PlaceResolverPort",
    "TextCompletionPort",
    "BrowserLauncherPort",
    "SpeechRecognizerPort",
]
