"""Tests for unique login generation."""

import pytest
from unittest.mock import Mock, call

from gdpr_sanitizer.errors import LoginExhaustedError
from gdpr_sanitizer.models import UserLookup, UserRecord
from gdpr_sanitizer.sanitizers import SyntheticValueProvider, UniqueLoginGenerator
from gdpr_sanitizer.store import InMemoryRecordStore


@pytest.fixture
def taken_user() -> UserRecord:
    return UserRecord(id=99, login="taken")


@pytest.fixture
def mock_store():
    store = Mock()
    store.find_user.return_value = None
    return store


@pytest.fixture
def mock_provider():
    provider = Mock()
    provider.user_name.return_value = "taken"
    provider.numerify.side_effect = lambda text: text.replace("#", "7")
    return provider


class TestUniqueLoginGenerator:
    """Test UniqueLoginGenerator."""

    def test_first_candidate_free(self, mock_store, mock_provider):
        """Test an unused first candidate is returned as-is."""
        mock_provider.user_name.return_value = "fresh"
        generator = UniqueLoginGenerator(mock_store, mock_provider)

        assert generator.generate() == "fresh"
        mock_store.find_user.assert_called_once_with(UserLookup.LOGIN, "fresh")
        mock_provider.numerify.assert_not_called()

    def test_retries_on_collision(self, mock_store, mock_provider, taken_user):
        """Test a colliding candidate is replaced by a new one."""
        mock_provider.user_name.side_effect = ["taken", "free"]
        mock_store.find_user.side_effect = [taken_user, None]
        generator = UniqueLoginGenerator(mock_store, mock_provider)

        assert generator.generate() == "free"
        assert mock_store.find_user.call_args_list == [
            call(UserLookup.LOGIN, "taken"),
            call(UserLookup.LOGIN, "free"),
        ]

    def test_suffix_from_fifth_attempt(self, mock_store, mock_provider, taken_user):
        """Test candidates get a numeric suffix after four collisions."""
        mock_store.find_user.side_effect = [taken_user] * 4 + [None]
        generator = UniqueLoginGenerator(mock_store, mock_provider)

        assert generator.generate() == "taken77777"
        mock_provider.numerify.assert_called_once_with("taken#####")
        looked_up = [c.args[1] for c in mock_store.find_user.call_args_list]
        assert looked_up == ["taken"] * 4 + ["taken77777"]

    def test_exhaustion(self, mock_store, mock_provider, taken_user):
        """Test the generator gives up after exactly 30 lookups."""
        mock_store.find_user.return_value = taken_user
        generator = UniqueLoginGenerator(mock_store, mock_provider)

        with pytest.raises(LoginExhaustedError) as exc_info:
            generator.generate()

        assert exc_info.value.attempts == 30
        assert mock_store.find_user.call_count == 30
        assert mock_provider.numerify.call_count == 26

    def test_custom_limits(self, mock_store, mock_provider, taken_user):
        """Test attempt limit and suffix width are configurable."""
        mock_store.find_user.return_value = taken_user
        generator = UniqueLoginGenerator(
            mock_store, mock_provider, max_attempts=5, suffix_after=1, suffix_digits=2
        )

        with pytest.raises(LoginExhaustedError):
            generator.generate()

        assert mock_store.find_user.call_count == 5
        assert mock_provider.numerify.call_args_list[0] == call("taken##")
        assert mock_provider.numerify.call_count == 3

    def test_never_returns_existing_login(self):
        """Test a login already held by a user is skipped."""
        first_candidate = SyntheticValueProvider(seed=7).user_name()
        store = InMemoryRecordStore(users=[UserRecord(id=1, login=first_candidate)])
        generator = UniqueLoginGenerator(store, SyntheticValueProvider(seed=7))

        login = generator.generate()

        assert login != first_candidate
        assert store.find_user(UserLookup.LOGIN, login) is None
