"""Localized request handling for voice-assistant skills.

Main components:
- models: HandlerInput, RequestEnvelope, Request, Intent, Response
- base: RequestHandler contract and LocaledHandler
- decorators: resource_bundle_base
- dispatcher: RequestDispatcher
"""

from infrastructure.handlers.base import LocaledHandler, RequestHandler
from infrastructure.handlers.decorators import resource_bundle_base
from infrastructure.handlers.dispatcher import RequestDispatcher
from infrastructure.handlers.models import (
    HandlerInput,
    Intent,
    Request,
    RequestEnvelope,
    Response,
)

__all__ = [
    "HandlerInput",
    "Intent",
    "Request",
    "RequestEnvelope",
    "Response",
    "RequestHandler",
    "LocaledHandler",
    "resource_bundle_base",
    "RequestDispatcher",
]
