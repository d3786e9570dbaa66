"""Localized handlers for the skill's built-in requests."""

from typing import Optional

from infrastructure.handlers import (
    HandlerInput,
    LocaledHandler,
    Response,
    resource_bundle_base,
)
from infrastructure.i18n import Locale, MessageLookup

HELP_INTENT = "AMAZON.HelpIntent"
FALLBACK_INTENT = "AMAZON.FallbackIntent"


def is_intent(handler_input: HandlerInput, name: str) -> bool:
    request = handler_input.request
    return (
        request.type == "IntentRequest"
        and request.intent is not None
        and request.intent.name == name
    )


class LaunchRequestHandler(LocaledHandler):
    """Greets the user when the skill is opened.

    Loads bundles named LaunchRequestHandler.<locale>.yml.
    """

    def can_handle(self, handler_input: HandlerInput) -> bool:
        return handler_input.request.type == "LaunchRequest"

    def handle_request(
        self,
        handler_input: HandlerInput,
        locale: Locale,
        messages: MessageLookup,
    ) -> Optional[Response]:
        speech = messages.get_message(
            locale, "welcome", "Welcome to the locale skill."
        )
        return Response(
            speech=speech,
            reprompt=speech,
            card_title=messages.get_message(locale, "card_title", "Hello"),
            card_content=speech,
        )


@resource_bundle_base("help")
class HelpIntentHandler(LocaledHandler):
    def can_handle(self, handler_input: HandlerInput) -> bool:
        return is_intent(handler_input, HELP_INTENT)

    def handle_request(
        self,
        handler_input: HandlerInput,
        locale: Locale,
        messages: MessageLookup,
    ) -> Optional[Response]:
        speech = messages.get_message(
            locale, "speech", "You can say hello to me."
        )
        reprompt = messages.get_message(locale, "reprompt", "What would you like to do?")
        return Response(
            speech=speech,
            reprompt=reprompt,
            card_title=messages.get_message(locale, "card_title", "Help"),
            card_content=speech,
        )


@resource_bundle_base("help")
class FallbackIntentHandler(LocaledHandler):
    """Answers requests no other handler understood, naming the intent."""

    def can_handle(self, handler_input: HandlerInput) -> bool:
        request = handler_input.request
        return request.type == "IntentRequest" and not is_intent(
            handler_input, HELP_INTENT
        )

    def handle_request(
        self,
        handler_input: HandlerInput,
        locale: Locale,
        messages: MessageLookup,
    ) -> Optional[Response]:
        intent = handler_input.request.intent
        speech = messages.format_message(
            locale,
            "fallback.speech",
            "Sorry, I can't help with {{intent}} yet.",
            intent=intent.name if intent else "that",
        )
        return Response(speech=speech, reprompt=speech)
