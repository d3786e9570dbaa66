"""Request dispatch chain for voice-assistant handlers."""

from typing import Iterable, List, Optional

from infrastructure.handlers.base import RequestHandler
from infrastructure.handlers.models import HandlerInput, Response
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class RequestDispatcher:
    """Routes a request through registered handlers in order.

    A handler that accepts the request but returns None passes the
    request on to the next accepting handler.

    Example:
        dispatcher = RequestDispatcher([LaunchRequestHandler(), HelpIntentHandler()])
        response = dispatcher.dispatch(handler_input)
    """

    def __init__(self, handlers: Optional[Iterable[RequestHandler]] = None):
        self.handlers: List[RequestHandler] = list(handlers or [])

    def add_handler(self, handler: RequestHandler) -> None:
        """Register a handler at the end of the chain."""
        self.handlers.append(handler)

    def dispatch(self, handler_input: HandlerInput) -> Optional[Response]:
        """Dispatch a request to the first handler producing a response.

        Args:
            handler_input: Input for the current request.

        Returns:
            Response from the first accepting handler that returned one,
            or None if no handler did.

        Raises:
            InvalidLocaleError: If a localized handler rejects the request.
        """
        request_id = handler_input.request_envelope.request.request_id

        for handler in self.handlers:
            if not handler.can_handle(handler_input):
                continue

            response = handler.handle(handler_input)
            if response is not None:
                return response

            logger.debug(
                "handler_passed_through",
                request_id=request_id,
                handler=type(handler).__name__,
            )

        logger.info("no_handler_response", request_id=request_id)
        return None
