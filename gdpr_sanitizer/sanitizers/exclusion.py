"""Resolution of the users to keep out of a run."""

from typing import FrozenSet, List, Optional

from gdpr_sanitizer.errors import UserNotFoundError
from gdpr_sanitizer.models import UserLookup
from gdpr_sanitizer.store.base import RecordStore
from gdpr_sanitizer.utils import get_logger

logger = get_logger(__name__)


class ExclusionResolver:
    """
    Turn a ``--keep`` value into user ids.

    The value is a comma-separated list of tokens. Numeric tokens are taken
    as ids as-is, tokens containing ``@`` are matched against emails and
    anything else against logins. A token that matches nobody aborts
    resolution, unless ``skip_not_found`` is set, in which case it is
    dropped with a warning and listed in ``not_found``.
    """

    def __init__(self, store: RecordStore, skip_not_found: bool = False):
        """
        Initialize resolver.

        Args:
            store: Store to look users up in
            skip_not_found: Drop unmatched tokens instead of failing
        """
        self.store = store
        self.skip_not_found = skip_not_found
        self.not_found: List[str] = []

    def resolve(self, keep: Optional[str]) -> FrozenSet[int]:
        """
        Resolve every token of a keep value.

        Args:
            keep: Comma-separated ids, logins and emails; None or empty for none

        Returns:
            Ids of the users to keep

        Raises:
            UserNotFoundError: If a token matches nobody and skipping is off
        """
        self.not_found = []
        if not keep:
            return frozenset()

        user_ids = set()
        for token in keep.split(","):
            token = token.strip()
            if not token:
                continue
            user_id = self.resolve_token(token)
            if user_id is not None:
                user_ids.add(user_id)

        logger.info(f"Keeping {len(user_ids)} users")
        return frozenset(user_ids)

    def resolve_token(self, token: str) -> Optional[int]:
        """
        Resolve a single token.

        Args:
            token: Id, login or email

        Returns:
            User id, or None if unmatched and skipping is on

        Raises:
            UserNotFoundError: If unmatched and skipping is off
        """
        if token.isascii() and token.isdigit():
            return int(token)

        lookup = UserLookup.EMAIL if "@" in token else UserLookup.LOGIN
        user = self.store.find_user(lookup, token)
        if user is not None:
            return user.id

        if not self.skip_not_found:
            raise UserNotFoundError(token, lookup.value)

        logger.warning(f"user {lookup.value} to keep not found, skipping: {token}")
        self.not_found.append(token)
        return None
