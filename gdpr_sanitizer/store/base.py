"""Record store interface."""

import hashlib
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import AbstractSet, Iterator, List, Optional, Union

from gdpr_sanitizer.models import (
    CommentRecord,
    CommentStatus,
    CommentUpdate,
    Site,
    UserLookup,
    UserRecord,
    UserUpdate,
)


def hash_password(password: str) -> str:
    """
    Hash a password for storage.

    WordPress accepts plain MD5 hashes and rehashes them on the next login,
    so every store writes this format.

    Args:
        password: Plain text password

    Returns:
        Hex digest
    """
    return hashlib.md5(password.encode("utf-8")).hexdigest()


class RecordStore(ABC):
    """Base class for user and comment storage backends."""

    def __init__(self):
        """Initialize the partition stack."""
        self._partition_stack: List[int] = []

    # Partitions

    @abstractmethod
    def is_multisite(self) -> bool:
        """Whether the store is split into sites."""
        pass

    @abstractmethod
    def list_partitions(self) -> List[Site]:
        """List every site; empty on single-site stores."""
        pass

    @abstractmethod
    def get_partition(self, site_id: int) -> Optional[Site]:
        """Look up one site, None if it does not exist."""
        pass

    @abstractmethod
    def _switch_to(self, site_id: Optional[int]) -> None:
        """
        Point subsequent reads and writes at a site.

        Args:
            site_id: Site to use, None for the default context
        """
        pass

    @property
    def current_partition(self) -> Optional[int]:
        """Site currently in effect, None for the default context."""
        return self._partition_stack[-1] if self._partition_stack else None

    def enter_partition(self, site_id: int) -> None:
        """Switch to a site, remembering the previous one."""
        self._switch_to(site_id)
        self._partition_stack.append(site_id)

    def restore_default_partition(self) -> None:
        """Return to the site that was in effect before the last enter_partition."""
        if not self._partition_stack:
            return
        self._partition_stack.pop()
        self._switch_to(self.current_partition)

    @contextmanager
    def partition(self, site_id: Optional[int]) -> Iterator["RecordStore"]:
        """
        Scope store operations to a site.

        The previous site is restored on every exit path. A site_id of None
        leaves the context untouched.

        Args:
            site_id: Site to enter, or None

        Yields:
            The store itself
        """
        if site_id is None:
            yield self
            return

        self.enter_partition(site_id)
        try:
            yield self
        finally:
            self.restore_default_partition()

    # Comments

    @abstractmethod
    def list_comments(self, status: CommentStatus) -> List[CommentRecord]:
        """List comments of one status class in the current site."""
        pass

    @abstractmethod
    def update_comment(self, comment_id: int, fields: CommentUpdate) -> None:
        """
        Overwrite a comment's author fields.

        Raises:
            RecordNotFoundError: If the comment or its parent post is gone
        """
        pass

    # Users

    @abstractmethod
    def list_users(self, exclude: AbstractSet[int] = frozenset()) -> List[UserRecord]:
        """List users of the current site, minus the excluded ids."""
        pass

    @abstractmethod
    def find_user(self, by: UserLookup, value: Union[int, str]) -> Optional[UserRecord]:
        """
        Find a single user by exact match.

        Args:
            by: Field to match on
            value: Identifier, login or email

        Returns:
            Matching user or None
        """
        pass

    @abstractmethod
    def update_user_primary_fields(self, user_id: int, fields: UserUpdate) -> None:
        """
        Overwrite a user's profile fields. Does not touch the login.

        Raises:
            RecordNotFoundError: If the user is gone
        """
        pass

    @abstractmethod
    def update_user_login(self, user_id: int, new_login: str) -> None:
        """
        Overwrite a user's login.

        Raises:
            RecordNotFoundError: If the user is gone
        """
        pass

    # Lifecycle

    def close(self) -> None:
        """Release connections held by the store."""
        pass

    def __enter__(self) -> "RecordStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
