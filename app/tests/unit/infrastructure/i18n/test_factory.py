"""Tests for infrastructure.i18n.factory module."""

from infrastructure.i18n import (
    InMemoryMessageSourceLoader,
    Locale,
    MessageSourceResolver,
    YAMLMessageSourceLoader,
    create_message_source_resolver,
)
from infrastructure.i18n.factory import default_messages_dir


class TestCreateMessageSourceResolver:
    """Tests for create_message_source_resolver()."""

    def test_uses_yaml_loader_for_existing_dir(self, temp_messages_dir):
        """An existing directory is read with the YAML loader."""
        resolver = create_message_source_resolver(messages_dir=temp_messages_dir)

        assert isinstance(resolver, MessageSourceResolver)
        assert isinstance(resolver.loader, YAMLMessageSourceLoader)
        assert resolver.resolve("greetings", Locale("fr", "CA")) is not None

    def test_missing_dir_falls_back_to_empty_loader(self, tmp_path):
        """A missing directory yields a resolver that finds nothing."""
        resolver = create_message_source_resolver(messages_dir=tmp_path / "absent")

        assert isinstance(resolver.loader, InMemoryMessageSourceLoader)
        assert resolver.resolve("greetings", Locale("en", "US")) is None

    def test_passes_options(self, temp_messages_dir):
        """default_resource_base and use_cache are forwarded."""
        resolver = create_message_source_resolver(
            messages_dir=temp_messages_dir,
            default_resource_base="messages",
            use_cache=False,
        )

        assert resolver.default_resource_base == "messages"
        assert resolver.use_cache is False
        source = resolver.resolve("unknown", Locale("de"))
        assert source.get_message("goodbye") == "Goodbye"

    def test_default_dir_is_app_locales(self):
        """Without messages_dir the bundled app/locales directory is used."""
        assert default_messages_dir().name == "locales"
        resolver = create_message_source_resolver()
        assert isinstance(resolver.loader, YAMLMessageSourceLoader)
