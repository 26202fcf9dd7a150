import pytest
import structlog

from iris_matcher.identity_store import IdentityStore
from iris_matcher.matcher import IrisMatcher


class ScriptedInput:
    """Input function that replays canned answers and records the prompts."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture(autouse=True)
def reset_logging():
    # Sessions bind structlog to the captured stderr of the test that ran them
    yield
    structlog.reset_defaults()


@pytest.fixture
def store():
    return IdentityStore()


@pytest.fixture
def matcher(store):
    return IrisMatcher(store)


@pytest.fixture
def scripted_input():
    return ScriptedInput
