"""
Pytest configuration and shared fixtures for the test suite.
Provides registries, resolvers and conversation contexts for unit and integration tests.
"""
import pytest

from roleplay.models.prompt import ConversationContext, HistoryMessage
from roleplay.prompts.resolver import PromptResolver
from roleplay.scenarios.catalog import build_default_registry


@pytest.fixture
def registry():
    """Fresh registry with the built-in scenarios."""
    return build_default_registry()


@pytest.fixture
def resolver(registry):
    """Resolver over the built-in scenarios."""
    return PromptResolver(registry)


@pytest.fixture
def history():
    """Short job interview exchange."""
    return [
        HistoryMessage(role="tutor", text="Tell me about yourself?"),
        HistoryMessage(role="user", text="I am hard-working."),
    ]


@pytest.fixture
def context(history):
    """Context for a student named Maria."""
    return ConversationContext(student_name="Maria", conversation_history=history)


@pytest.fixture
def empty_context():
    """Context with no history yet."""
    return ConversationContext(student_name="Luca")
