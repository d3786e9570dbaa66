"""Message source loading interface and implementations.

Defines the contract for loading message bundles and provides YAML-based
and in-memory loaders.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from infrastructure.i18n.models import MessageSource
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class MessageSourceLoader(ABC):
    """Abstract base for message source loaders.

    Implementations define how bundles are located for a
    (resource base, locale qualifier) pair.
    """

    @abstractmethod
    def load(
        self, resource_base: str, qualifier: Optional[str] = None
    ) -> Optional[MessageSource]:
        """Load the bundle for a resource base and locale qualifier.

        Args:
            resource_base: Bundle family (e.g., "LaunchRequestHandler").
            qualifier: Locale tag ("fr-CA", "fr") or None for the
                unqualified bundle.

        Returns:
            MessageSource, or None if no such bundle exists.

        Raises:
            ValueError: If the bundle exists but is malformed.
            OSError: If the backing storage cannot be read.
        """
        pass


class YAMLMessageSourceLoader(MessageSourceLoader):
    """Loader for YAML bundle files.

    Expects files named <resource_base>.<qualifier>.yml, or
    <resource_base>.yml for the unqualified bundle, in the
    configured directory. Nested mappings are flattened to
    dot-separated keys:

        help:
          speech: How can I help?

    is exposed as "help.speech".

    Attributes:
        directory: Path to directory containing YAML files.
    """

    SUFFIXES = (".yml", ".yaml")

    def __init__(self, directory: Path):
        """Initialize YAML message source loader.

        Args:
            directory: Path to directory with YAML bundle files.
        """
        self.directory = Path(directory)

        if not self.directory.is_dir():
            raise ValueError(f"Messages directory not found: {self.directory}")

        logger.info("initialized_yaml_loader", directory=str(self.directory))

    def load(
        self, resource_base: str, qualifier: Optional[str] = None
    ) -> Optional[MessageSource]:
        """Load a bundle from YAML.

        Args:
            resource_base: Bundle family.
            qualifier: Locale tag or None.

        Returns:
            MessageSource, or None if no file matches.

        Raises:
            ValueError: If YAML parsing fails, the document is not a mapping,
                or a key is not a string.
        """
        path = self._find_file(resource_base, qualifier)
        if path is None:
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")

        messages = flatten_messages(data)
        logger.info(
            "loaded_message_source",
            resource_base=resource_base,
            qualifier=qualifier,
            file=str(path),
            message_count=len(messages),
        )
        return MessageSource(
            resource_base=resource_base, qualifier=qualifier, messages=messages
        )

    def _find_file(self, resource_base: str, qualifier: Optional[str]) -> Optional[Path]:
        stem = f"{resource_base}.{qualifier}" if qualifier else resource_base
        for suffix in self.SUFFIXES:
            path = self.directory / f"{stem}{suffix}"
            if path.is_file():
                return path
        return None


class InMemoryMessageSourceLoader(MessageSourceLoader):
    """Loader backed by an embedded mapping.

    Example:
        loader = InMemoryMessageSourceLoader({
            ("LaunchRequestHandler", "fr"): {"welcome": "Bonjour"},
            ("messages", None): {"goodbye": "Goodbye"},
        })
    """

    def __init__(
        self,
        bundles: Optional[Mapping[Tuple[str, Optional[str]], Mapping[str, Any]]] = None,
    ):
        self.bundles: Dict[Tuple[str, Optional[str]], Dict[str, str]] = {
            key: flatten_messages(messages)
            for key, messages in (bundles or {}).items()
        }

    def load(
        self, resource_base: str, qualifier: Optional[str] = None
    ) -> Optional[MessageSource]:
        messages = self.bundles.get((resource_base, qualifier))
        if messages is None:
            return None
        return MessageSource(
            resource_base=resource_base, qualifier=qualifier, messages=messages
        )


def flatten_messages(data: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested mappings into dot-separated message keys.

    Args:
        data: Possibly nested mapping of keys to templates.
        prefix: Key prefix for the current nesting level.

    Returns:
        Flat dict of key -> template string. None values are skipped.

    Raises:
        ValueError: If a key is not a string. YAML reads unquoted keys such
            as `no`, `on` or `404` as bool or int; quote them in bundles.
    """
    flat: Dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(key, str):
            raise ValueError(
                f"Message key {prefix}{key!r} is a {type(key).__name__}, not a string"
            )
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(flatten_messages(value, prefix=f"{full_key}."))
        elif value is not None:
            flat[full_key] = str(value)
    return flat
