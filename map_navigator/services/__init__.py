"""Services layer - Application orchestration.

Available services:
- IntentExtractorService: Origin/destination extraction via the language model
- NavigationDispatcherService: Resolution, URL synthesis and browser launch
- RequestHandler: Navigation and speech request envelopes
"""

from .intent_extractor import IntentExtractorService
from .navigation_dispatcher import NavigationDispatcherService
from .request_handler import HandlerResponse, NavigateRequest, RequestHandler

__all__ = [
    "IntentExtractorService",
    "NavigationDispatcherService",
    "RequestHandler",
    "HandlerResponse",
    "NavigateRequest",
]
