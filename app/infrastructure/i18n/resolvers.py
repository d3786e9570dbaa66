"""Locale resolution logic for turning raw locale tags into Locale values.

Tags arrive from the request envelope and are not validated by the sender,
so parsing is lenient: a missing region is accepted, only a missing tag is
rejected.
"""

import re
from typing import Optional

from infrastructure.i18n.exceptions import InvalidLocaleError
from infrastructure.i18n.models import Locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# "en-US" is the expected shape; "en_US" shows up from some clients
LOCALE_SEPARATOR = re.compile(r"[-_]")


class LocaleResolver:
    """Resolves a Locale from a raw locale tag.

    Parsing rules:
    1. Surrounding whitespace is ignored
    2. The first two segments are language and region
    3. A single segment gives a Locale without region
    4. An empty tag raises InvalidLocaleError
    """

    def resolve_from_string(self, locale_tag: Optional[str]) -> Locale:
        """Parse a raw locale tag.

        Args:
            locale_tag: Locale tag (e.g., "en-US", "fr").

        Returns:
            Parsed Locale with normalized case.

        Raises:
            InvalidLocaleError: If locale_tag is None, empty or has no language.
        """
        if locale_tag is None or not locale_tag.strip():
            logger.warning("missing_locale_tag", locale_tag=locale_tag)
            raise InvalidLocaleError("Locale tag is missing or empty", locale_tag)

        segments = LOCALE_SEPARATOR.split(locale_tag.strip())
        language = segments[0].strip().lower()
        if not language:
            logger.warning("invalid_locale_tag", locale_tag=locale_tag)
            raise InvalidLocaleError(
                f"Locale tag has no language: {locale_tag!r}", locale_tag
            )

        region = segments[1].strip().upper() if len(segments) > 1 else ""
        return Locale(language=language, region=region or None)
