"""Message source resolution and lookup for handler logic.

Resolves the most specific bundle available for a locale and exposes
lookups that fall back to caller-supplied default text instead of failing.
"""

import re
from typing import Any, Dict, List, Optional, Tuple

from infrastructure.i18n.loader import MessageSourceLoader
from infrastructure.i18n.models import Locale, MessageSource
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}|\{(\w+)\}")

CacheKey = Tuple[str, Optional[str]]


class MessageSourceResolver:
    """Resolves a MessageSource for a resource base and locale.

    Fallback chain, first match wins:
    1. resource_base + "language-REGION"
    2. resource_base + "language"
    3. default_resource_base without qualifier (if configured)
    4. None

    Loader errors are logged and treated as "not found" for that step.

    Attributes:
        loader: MessageSourceLoader used to read bundles.
        default_resource_base: Process-wide bundle tried last.
        use_cache: Whether to cache load results by (resource_base, qualifier).
        cache: Loaded sources and confirmed absences.
    """

    def __init__(
        self,
        loader: MessageSourceLoader,
        default_resource_base: Optional[str] = None,
        use_cache: bool = True,
    ):
        """Initialize MessageSourceResolver.

        Args:
            loader: MessageSourceLoader instance for loading bundles.
            default_resource_base: Unqualified bundle used when no
                locale-specific bundle exists.
            use_cache: Whether to cache load results (default: True).
        """
        self.loader = loader
        self.default_resource_base = default_resource_base
        self.use_cache = use_cache
        self.cache: Dict[CacheKey, Optional[MessageSource]] = {}

    def candidates(self, resource_base: str, locale: Locale) -> List[CacheKey]:
        """List (resource_base, qualifier) pairs in fallback order."""
        chain: List[CacheKey] = []
        if locale.region:
            chain.append((resource_base, locale.tag))
        chain.append((resource_base, locale.language))
        if self.default_resource_base:
            chain.append((self.default_resource_base, None))
        return chain

    def resolve(self, resource_base: str, locale: Locale) -> Optional[MessageSource]:
        """Resolve the most specific MessageSource for a locale.

        Args:
            resource_base: Bundle family to load.
            locale: Locale to resolve for.

        Returns:
            MessageSource, or None if no step of the chain matched.
        """
        for base, qualifier in self.candidates(resource_base, locale):
            source = self._load(base, qualifier)
            if source is not None:
                logger.debug(
                    "resolved_message_source",
                    resource_base=base,
                    qualifier=qualifier,
                    locale=locale.tag,
                )
                return source

        logger.debug(
            "no_message_source",
            resource_base=resource_base,
            locale=locale.tag,
        )
        return None

    def lookup(self, resource_base: str, locale: Locale) -> "MessageLookup":
        """Resolve a MessageSource and wrap it for handler logic."""
        return MessageLookup(
            resolver=self,
            resource_base=resource_base,
            locale=locale,
            source=self.resolve(resource_base, locale),
        )

    def clear_cache(self) -> None:
        """Clear all cached load results."""
        self.cache.clear()
        logger.info("cleared_message_source_cache")

    def _load(self, resource_base: str, qualifier: Optional[str]) -> Optional[MessageSource]:
        key = (resource_base, qualifier)
        if self.use_cache and key in self.cache:
            return self.cache[key]

        try:
            source = self.loader.load(resource_base, qualifier)
        except Exception as e:  # pylint: disable=broad-except
            logger.warning(
                "message_source_load_failed",
                resource_base=resource_base,
                qualifier=qualifier,
                error=str(e),
            )
            return None

        if self.use_cache:
            self.cache[key] = source
        return source


class MessageLookup:
    """Message lookup handed to handler logic.

    Bound to the MessageSource resolved for the request locale. Lookups
    never raise; a missing source or key returns the default text.

    Example:
        speech = messages.get_message(locale, "welcome", "Welcome to the skill.")
    """

    def __init__(
        self,
        resolver: MessageSourceResolver,
        resource_base: str,
        locale: Locale,
        source: Optional[MessageSource] = None,
    ):
        self._resolver = resolver
        self.resource_base = resource_base
        self.locale = locale
        self.source = source

    def get_message(self, locale: Optional[Locale], key: str, default: str) -> str:
        """Retrieve a message template, or the default.

        Args:
            locale: Locale to look up; None or the bound locale uses the
                source resolved for the request.
            key: Message key.
            default: Text returned when no template exists.

        Returns:
            Stored template if present, otherwise default unmodified.
        """
        source = self._source_for(locale)
        if source is None:
            return default
        message = source.get_message(key)
        return default if message is None else message

    def format_message(
        self,
        locale: Optional[Locale],
        key: str,
        default: str,
        **variables: Any,
    ) -> str:
        """Retrieve a message and interpolate variables.

        Replaces {{name}} and {name} placeholders. Placeholders without a
        matching variable are left in place.

        Args:
            locale: Locale to look up.
            key: Message key.
            default: Template used when no message exists.
            **variables: Values for interpolation.

        Returns:
            Interpolated message string.
        """
        message = self.get_message(locale, key, default)
        missing = []

        def _replace(match: re.Match) -> str:
            name = match.group(1) or match.group(2)
            if name in variables:
                return str(variables[name])
            missing.append(name)
            return match.group(0)

        result = PLACEHOLDER_PATTERN.sub(_replace, message)
        if missing:
            logger.warning(
                "missing_interpolation_variable",
                key=key,
                variables=missing,
                available_variables=list(variables.keys()),
            )
        return result

    def has_message(self, key: str) -> bool:
        """Check if the bound source contains a key."""
        return self.source is not None and self.source.has_message(key)

    def _source_for(self, locale: Optional[Locale]) -> Optional[MessageSource]:
        if locale is None or locale == self.locale:
            return self.source
        return self._resolver.resolve(self.resource_base, locale)
