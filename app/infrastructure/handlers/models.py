"""Request and response models for voice-assistant handlers.

Mirrors the parts of the voice-assistant request envelope that handlers
read. Wire payloads use camelCase keys; fields accept both forms.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class HandlerModel(BaseModel):
    """Shared configuration for handler models.

    Fields populate by name or wire alias, string values are stripped and
    assignments are validated.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class EnvelopeModel(HandlerModel):
    """Base for envelope models: accepts unknown wire fields."""

    model_config = ConfigDict(extra="allow")


class Intent(EnvelopeModel):
    """Intent recognised by the voice assistant."""

    name: str
    slots: Dict[str, Any] = Field(default_factory=dict)


class Request(EnvelopeModel):
    """Inbound request.

    Attributes:
        request_id: Unique request identifier
        locale: Raw locale tag (e.g., "en-US"). May be missing or malformed.
        type: Request type (e.g., "LaunchRequest", "IntentRequest")
        intent: Intent for IntentRequest, None otherwise
    """

    request_id: str = Field(alias="requestId")
    locale: Optional[str] = None
    type: str = "IntentRequest"
    timestamp: Optional[str] = None
    intent: Optional[Intent] = None


class RequestEnvelope(EnvelopeModel):
    """Envelope delivered by the voice assistant."""

    version: str = "1.0"
    request: Request
    session: Optional[Dict[str, Any]] = None
    context: Optional[Dict[str, Any]] = None


class HandlerInput(HandlerModel):
    """Input passed to request handlers by the dispatcher.

    Example:
        handler_input = HandlerInput.from_payload(json.loads(body))
        response = dispatcher.dispatch(handler_input)
    """

    request_envelope: RequestEnvelope

    @property
    def request(self) -> Request:
        return self.request_envelope.request

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "HandlerInput":
        """Build HandlerInput from a raw request envelope payload."""
        return cls(request_envelope=RequestEnvelope.model_validate(payload))


class Response(HandlerModel):
    """Response produced by a handler.

    Attributes:
        speech: Text to speak
        reprompt: Text spoken if the user does not answer
        card_title: Title of the companion card
        card_content: Body of the companion card
        should_end_session: Whether the session ends after this response
    """

    speech: str
    reprompt: Optional[str] = None
    card_title: Optional[str] = None
    card_content: Optional[str] = None
    should_end_session: bool = False
