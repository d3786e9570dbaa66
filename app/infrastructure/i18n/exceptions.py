"""Exceptions raised by the i18n system."""


class InvalidLocaleError(ValueError):
    """Raised when a locale tag is missing or empty.

    A tag without a region (e.g. "en") is a valid input and never raises.
    Only an absent tag, or one without a language segment, is rejected.

    Example:
        >>> LocaleResolver().resolve_from_string("")
        Traceback (most recent call last):
        ...
        InvalidLocaleError: Locale tag is missing or empty
    """

    def __init__(self, message: str, locale_tag: str | None = None):
        """Initialize with message and the offending tag.

        Args:
            message: Error message
            locale_tag: Raw tag that failed to parse
        """
        super().__init__(message)
        self.locale_tag = locale_tag
