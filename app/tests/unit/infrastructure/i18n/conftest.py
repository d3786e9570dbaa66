"""Feature-level fixtures for i18n system tests.

Provides bundle directories and resolvers for locale resolution and
message lookup scenarios.
"""

import pytest
import yaml

from infrastructure.i18n import YAMLMessageSourceLoader


@pytest.fixture
def temp_messages_dir(tmp_path):
    """Create temporary directory with sample YAML bundles.

    Returns a directory structure like:
    - greetings.en.yml
    - greetings.fr.yml
    - greetings.fr-CA.yml
    - messages.yml
    """
    bundles = {
        "greetings.en.yml": {
            "welcome": "Welcome",
            "incident": {"created": "Incident {{incident_id}} created"},
        },
        "greetings.fr.yml": {"welcome": "Bonjour"},
        "greetings.fr-CA.yml": {"welcome": "Bonjour, le Québec"},
        "messages.yml": {"goodbye": "Goodbye"},
    }
    for name, data in bundles.items():
        with open(tmp_path / name, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_messages_dir):
    """Create YAMLMessageSourceLoader for the temporary bundle directory."""
    return YAMLMessageSourceLoader(temp_messages_dir)
