"""Pytest configuration and shared fixtures."""
import pytest

from campus_assistant.conversation import Conversation, ReplyDelay
from campus_assistant.knowledge import KeywordMatcher, load_builtin_campus_data


@pytest.fixture(scope="session")
def campus_data():
    """Return the built-in knowledge base."""
    return load_builtin_campus_data()


@pytest.fixture
def matcher(campus_data):
    """Create a matcher over the built-in knowledge base."""
    return KeywordMatcher(campus_data)


@pytest.fixture
def conversation(matcher):
    """Create a conversation that replies without delay."""
    return Conversation(matcher, delay=ReplyDelay.none())


@pytest.fixture
def sample_yaml():
    """Return a small but complete knowledge base document."""
    return '''
greeting: Hi there!
fallback: Try asking about parking or the gym.
categories:
  Parking:
    Parking Permit: Permits cost $120 per semester.
    lot hours: Lots are open 6 AM - midnight.
  gym:
    gym hours: The gym is open 24/7.
quick_actions:
  - label: Permits
    icon: "P"
    query: How do I get a parking permit?
    category: parking
'''


@pytest.fixture
def sample_data_file(tmp_path, sample_yaml):
    """Create a temporary knowledge base file."""
    data_file = tmp_path / "campus.yaml"
    data_file.write_text(sample_yaml, encoding="utf-8")
    return data_file
