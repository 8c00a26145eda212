"""In-memory record store."""

from typing import AbstractSet, Dict, Iterable, List, Optional, Set, Tuple, Union

from gdpr_sanitizer.errors import RecordNotFoundError
from gdpr_sanitizer.models import (
    CommentRecord,
    CommentStatus,
    CommentUpdate,
    Site,
    UserLookup,
    UserRecord,
    UserUpdate,
)
from gdpr_sanitizer.store.base import RecordStore, hash_password


class InMemoryRecordStore(RecordStore):
    """
    Record store backed by plain dictionaries.

    Passing ``sites`` makes the store multi-site: comments are then owned by
    the site in their ``site_id`` and users are listed for every site in their
    ``site_ids``. Every call is recorded in ``operations`` together with the
    site it ran in.
    """

    def __init__(
        self,
        users: Iterable[UserRecord] = (),
        comments: Iterable[CommentRecord] = (),
        sites: Optional[Iterable[Site]] = None,
        posts: Optional[Iterable[Tuple[Optional[int], int]]] = None,
    ):
        """
        Initialize in-memory store.

        Args:
            users: Users to hold
            comments: Comments to hold
            sites: Sites of a multi-site store, None for single-site
            posts: (site_id, post_id) pairs of existing posts, None if every
                post exists
        """
        super().__init__()
        self.users: Dict[int, UserRecord] = {u.id: u.model_copy(deep=True) for u in users}
        self.comments: Dict[int, CommentRecord] = {
            c.id: c.model_copy(deep=True) for c in comments
        }
        self.sites: Optional[Dict[int, Site]] = (
            {s.id: s for s in sites} if sites is not None else None
        )
        self.posts: Optional[Set[Tuple[Optional[int], int]]] = (
            set(posts) if posts is not None else None
        )
        self.user_meta: Dict[int, Dict[str, object]] = {}
        self.comment_meta: Dict[int, Dict[str, object]] = {}
        self.operations: List[Tuple[str, Optional[int]]] = []
        self._active_site: Optional[int] = None

    def _record(self, operation: str) -> None:
        self.operations.append((operation, self._active_site))

    def is_multisite(self) -> bool:
        return self.sites is not None

    def list_partitions(self) -> List[Site]:
        self._record("list_partitions")
        if self.sites is None:
            return []
        return [self.sites[site_id] for site_id in sorted(self.sites)]

    def get_partition(self, site_id: int) -> Optional[Site]:
        if self.sites is None:
            return None
        return self.sites.get(site_id)

    def _switch_to(self, site_id: Optional[int]) -> None:
        self._active_site = site_id

    def _in_scope(self, comment: CommentRecord) -> bool:
        if self.sites is None:
            return True
        return comment.site_id == self._active_site

    def list_comments(self, status: CommentStatus) -> List[CommentRecord]:
        self._record(f"list_comments:{status.value}")
        return [
            c.model_copy(deep=True)
            for c in self.comments.values()
            if c.status == status and self._in_scope(c)
        ]

    def update_comment(self, comment_id: int, fields: CommentUpdate) -> None:
        self._record("update_comment")
        comment = self.comments.get(comment_id)
        if comment is None or not self._in_scope(comment):
            raise RecordNotFoundError("comment", comment_id)
        if self.posts is not None and comment.post_id not in {
            post_id for site_id, post_id in self.posts if site_id == comment.site_id
        }:
            raise RecordNotFoundError("post", comment.post_id, f"parent of comment {comment_id}")

        comment.author = fields.author
        comment.author_email = fields.author_email
        comment.author_url = fields.author_url
        comment.author_ip = fields.author_ip
        comment.agent = fields.agent
        if fields.meta:
            self.comment_meta.setdefault(comment_id, {}).update(fields.meta)

    def list_users(self, exclude: AbstractSet[int] = frozenset()) -> List[UserRecord]:
        self._record("list_users")
        return [
            u.model_copy(deep=True)
            for u in sorted(self.users.values(), key=lambda u: u.id)
            if u.id not in exclude
            and (self.sites is None or self._active_site in u.site_ids)
        ]

    def find_user(self, by: UserLookup, value: Union[int, str]) -> Optional[UserRecord]:
        self._record(f"find_user:{by.value}")
        for user in self.users.values():
            if by == UserLookup.ID and user.id == int(value):
                return user.model_copy(deep=True)
            if by == UserLookup.LOGIN and user.login == value:
                return user.model_copy(deep=True)
            if by == UserLookup.EMAIL and user.email == value:
                return user.model_copy(deep=True)
        return None

    def _get_user(self, user_id: int) -> UserRecord:
        user = self.users.get(user_id)
        if user is None:
            raise RecordNotFoundError("user", user_id)
        return user

    def update_user_primary_fields(self, user_id: int, fields: UserUpdate) -> None:
        self._record("update_user_primary_fields")
        user = self._get_user(user_id)
        user.password_hash = hash_password(fields.password)
        user.nicename = fields.nicename
        user.email = fields.email
        user.url = fields.url
        user.display_name = fields.display_name
        if fields.meta:
            self.user_meta.setdefault(user_id, {}).update(fields.meta)

    def update_user_login(self, user_id: int, new_login: str) -> None:
        self._record("update_user_login")
        self._get_user(user_id).login = new_login
