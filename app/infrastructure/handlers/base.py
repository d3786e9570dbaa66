"""Request handler contract and the localized base handler.

LocaledHandler resolves the request locale and the message bundle for it
before delegating to handle_request(). Message bundles are optional:
handlers always pass default text to MessageLookup.get_message(), so a
missing bundle never fails a request.

Example:
    class LaunchRequestHandler(LocaledHandler):
        def can_handle(self, handler_input):
            return handler_input.request.type == "LaunchRequest"

        def handle_request(self, handler_input, locale, messages):
            speech = messages.get_message(
                locale, "welcome", "Welcome to the skill."
            )
            return Response(speech=speech, reprompt=speech)
"""

from abc import ABC, abstractmethod
from typing import Optional

from structlog.stdlib import BoundLogger

from infrastructure.handlers.models import HandlerInput, Response
from infrastructure.i18n.messages import MessageLookup, MessageSourceResolver
from infrastructure.i18n.models import Locale
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.logging import bind_request_context, get_module_logger

logger = get_module_logger()


class RequestHandler(ABC):
    """Handler consulted by the dispatcher for each request."""

    @abstractmethod
    def can_handle(self, handler_input: HandlerInput) -> bool:
        """Return True if this handler accepts the request."""
        pass

    @abstractmethod
    def handle(self, handler_input: HandlerInput) -> Optional[Response]:
        """Handle the request.

        Returns:
            Response, or None to let the next handler try.
        """
        pass


class LocaledHandler(RequestHandler):
    """Base handler providing locale-based message bundles.

    The resource base (bundle file prefix) is chosen in this order:
    1. resource_base constructor argument
    2. @resource_bundle_base("name") on the class
    3. the concrete handler's class name

    Attributes:
        resource_bundle_base: Class-level resource base set by the decorator.
        resource_base: Resource base used by this instance.
        message_source_resolver: Resolver shared across handlers.
        locale_resolver: Parser for raw locale tags.
        log: Structlog logger (debug output is off by default).
    """

    resource_bundle_base: Optional[str] = None

    def __init__(
        self,
        message_source_resolver: Optional[MessageSourceResolver] = None,
        locale_resolver: Optional[LocaleResolver] = None,
        resource_base: Optional[str] = None,
        log: Optional[BoundLogger] = None,
    ):
        """Initialize handler.

        Args:
            message_source_resolver: Resolver for message bundles. Defaults to
                the process-wide resolver configured from settings.
            locale_resolver: Locale tag parser (default: LocaleResolver()).
            resource_base: Override for the bundle family name.
            log: Logger accepting leveled structured events. Defaults to
                this module's structlog logger.
        """
        if message_source_resolver is None:
            # Deferred so handlers can be built without loading settings
            from infrastructure.services.providers import get_message_source_resolver

            message_source_resolver = get_message_source_resolver()

        self.message_source_resolver = message_source_resolver
        self.locale_resolver = locale_resolver or LocaleResolver()
        self.resource_base = (
            resource_base or self.resource_bundle_base or type(self).__name__
        )
        self.log = log or logger

    def handle(self, handler_input: HandlerInput) -> Optional[Response]:
        """Resolve locale and messages, then delegate to handle_request().

        Args:
            handler_input: Input for the current request.

        Returns:
            Whatever handle_request() returned, unmodified.

        Raises:
            InvalidLocaleError: If the request has no locale tag.
        """
        request = handler_input.request_envelope.request

        with bind_request_context(
            correlation_id=request.request_id, handler=type(self).__name__
        ):
            self.log.debug(
                "handling_request",
                request_id=request.request_id,
                request_envelope=handler_input.request_envelope.model_dump(
                    by_alias=True, exclude_none=True
                ),
            )
            locale = self.locale_resolver.resolve_from_string(request.locale)

            self.log.debug(
                "resolved_locale",
                request_id=request.request_id,
                locale=locale.tag,
            )
            messages = self.message_source_resolver.lookup(self.resource_base, locale)

            return self.handle_request(handler_input, locale, messages)

    @abstractmethod
    def handle_request(
        self,
        handler_input: HandlerInput,
        locale: Locale,
        messages: MessageLookup,
    ) -> Optional[Response]:
        """Handle the request with its resolved locale and messages.

        messages may have no bundle behind it; always pass default text
        to get_message().

        Args:
            handler_input: Input for the current request.
            locale: Locale parsed from the request.
            messages: Lookup bound to the bundle resolved for locale.

        Returns:
            Response, or None to let the next handler try.
        """
        pass
