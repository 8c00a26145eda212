"""Sanitization engine: rewrites user and comment PII with synthetic values."""

from typing import AbstractSet, Dict, List, Optional, Tuple

from gdpr_sanitizer.errors import InputError, RecordNotFoundError
from gdpr_sanitizer.models import (
    CommentRecord,
    CommentStatus,
    CommentUpdate,
    RunResult,
    UserRecord,
    UserReplacement,
    UserUpdate,
)
from gdpr_sanitizer.sanitizers.hooks import HookPoint, SanitizerHooks
from gdpr_sanitizer.sanitizers.login_generator import UniqueLoginGenerator
from gdpr_sanitizer.sanitizers.progress import NullProgress, ProgressReporter
from gdpr_sanitizer.sanitizers.provider import SyntheticValueProvider
from gdpr_sanitizer.store.base import RecordStore
from gdpr_sanitizer.utils import get_logger

logger = get_logger(__name__)

# Enumeration order of comment status classes within a site
COMMENT_STATUSES = (CommentStatus.PUBLISHED, CommentStatus.TRASHED, CommentStatus.SPAM)

NO_USERS_WARNING = "No users changed (did you exclude them all?)"


class SanitizationEngine:
    """
    Overwrite identifying fields of users and comments.

    Records are processed one at a time: read, replaced, written. Ids,
    relationships and non-identifying fields are left alone. Nothing is
    rolled back if a run stops halfway.
    """

    def __init__(
        self,
        store: RecordStore,
        provider: Optional[SyntheticValueProvider] = None,
        hooks: Optional[SanitizerHooks] = None,
        login_generator: Optional[UniqueLoginGenerator] = None,
        progress: Optional[ProgressReporter] = None,
    ):
        """
        Initialize sanitization engine.

        Args:
            store: Store holding the records
            provider: Source of replacement values
            hooks: Callbacks fired around each update
            login_generator: Source of unused logins (built from store and
                provider if None)
            progress: Receives per-pass progress
        """
        self.store = store
        self.provider = provider or SyntheticValueProvider()
        self.hooks = hooks or SanitizerHooks()
        self.login_generator = login_generator or UniqueLoginGenerator(store, self.provider)
        self.progress = progress or NullProgress()

    def resolve_scope(self, site_id: Optional[int] = None) -> List[Optional[int]]:
        """
        Work out which sites a run covers.

        Args:
            site_id: Site to limit the run to, None for all

        Returns:
            Site ids to visit; [None] on single-site stores

        Raises:
            InputError: If a site is requested on a single-site store or
                does not exist
        """
        if not self.store.is_multisite():
            if site_id is not None:
                raise InputError("site parameter only valid on multi-site installs.")
            return [None]

        if site_id is not None:
            if self.store.get_partition(site_id) is None:
                raise InputError(f"Site not found: {site_id}")
            return [site_id]

        return [site.id for site in self.store.list_partitions()]

    def run(
        self, excluded_user_ids: AbstractSet[int] = frozenset(), site_id: Optional[int] = None
    ) -> RunResult:
        """
        Sanitize users, then comments.

        Args:
            excluded_user_ids: Users to leave untouched
            site_id: Site to limit the run to, None for all

        Returns:
            RunResult with counts

        Raises:
            InputError: If the site scope is invalid (before any write)
            LoginExhaustedError: If no unused login could be found
            RecordNotFoundError: If a user vanished mid-run
        """
        excluded = frozenset(excluded_user_ids)
        scopes = self.resolve_scope(site_id)
        result = RunResult(excluded_user_ids=sorted(excluded), site_id=site_id)

        logger.info(
            f"Starting run over {len(scopes)} site(s), keeping {len(excluded)} user(s)"
        )

        try:
            result.users_updated = self.sanitize_users(scopes, excluded, result)
            result.comments_updated = self.sanitize_comments(scopes, result)
        except Exception as e:
            logger.error(f"Sanitization failed: {e}")
            result.fail(str(e))
            raise

        result.complete()
        logger.info(
            f"Run complete: {result.users_updated} users, {result.comments_updated} comments "
            f"in {result.duration_seconds:.2f}s"
        )
        return result

    # Users

    def sanitize_users(
        self,
        scopes: List[Optional[int]],
        excluded_user_ids: AbstractSet[int] = frozenset(),
        result: Optional[RunResult] = None,
    ) -> int:
        """
        Rewrite every user in scope except the excluded ones.

        A user belonging to several sites is rewritten once.

        Args:
            scopes: Site ids from resolve_scope
            excluded_user_ids: Users to leave untouched
            result: Run result collecting warnings

        Returns:
            Number of users updated
        """
        batches: List[Tuple[Optional[int], List[UserRecord]]] = []
        seen = set()
        for scope in scopes:
            with self.store.partition(scope):
                users = [
                    user
                    for user in self.store.list_users(exclude=excluded_user_ids)
                    if user.id not in excluded_user_ids and user.id not in seen
                ]
            seen.update(user.id for user in users)
            batches.append((scope, users))

        total = sum(len(users) for _, users in batches)
        if total == 0:
            logger.warning(NO_USERS_WARNING)
            if result is not None:
                result.warn(NO_USERS_WARNING)
            return 0

        count = 0
        self.progress.start("Rewriting users...", total)
        try:
            for scope, users in batches:
                with self.store.partition(scope):
                    for user in users:
                        self.sanitize_user(user)
                        count += 1
                        self.progress.advance()
        finally:
            self.progress.finish()

        return count

    def sanitize_user(self, user: UserRecord) -> UserReplacement:
        """
        Rewrite a single user.

        The login is written by its own store call right after the primary
        fields, since the primary update does not persist it.

        Args:
            user: User as read from the store

        Returns:
            The replacement that was written
        """
        replacement = UserReplacement(
            fields=UserUpdate(
                password=self.provider.password(),
                nicename=self.provider.name(),
                email=self.provider.safe_email(),
                url=self.provider.url(),
                display_name=self.provider.first_name(),
            ),
            login=self.login_generator.generate(),
        )

        self.hooks.fire_user(HookPoint.PRE_UPDATE_USER, user, replacement, self.provider)
        self.store.update_user_primary_fields(user.id, replacement.fields)
        self.store.update_user_login(user.id, replacement.login)
        self.hooks.fire_user(HookPoint.POST_UPDATE_USER, user, replacement, self.provider)

        logger.debug(f"Rewrote user {user.id}")
        return replacement

    # Comments

    def gather_comments(self) -> List[CommentRecord]:
        """
        Collect published, trashed and spam comments of the current site.

        A comment whose status changes between the three listings may be
        missed; one listed twice is kept once.

        Returns:
            Comments in enumeration order, without duplicates
        """
        comments: Dict[int, CommentRecord] = {}
        for status in COMMENT_STATUSES:
            for comment in self.store.list_comments(status):
                comments.setdefault(comment.id, comment)
        return list(comments.values())

    def sanitize_comments(
        self, scopes: List[Optional[int]], result: Optional[RunResult] = None
    ) -> int:
        """
        Rewrite every comment in scope.

        Comments (or their posts) that disappear before being written are
        skipped.

        Args:
            scopes: Site ids from resolve_scope
            result: Run result collecting skips

        Returns:
            Number of comments updated
        """
        batches: List[Tuple[Optional[int], List[CommentRecord]]] = []
        for scope in scopes:
            with self.store.partition(scope):
                batches.append((scope, self.gather_comments()))

        total = sum(len(comments) for _, comments in batches)
        count = 0
        self.progress.start("Rewriting comments...", total)
        try:
            for scope, comments in batches:
                with self.store.partition(scope):
                    for comment in comments:
                        try:
                            self.sanitize_comment(comment)
                            count += 1
                        except RecordNotFoundError as e:
                            logger.warning(f"Skipping comment {comment.id}: {e}")
                            if result is not None:
                                result.comments_skipped += 1
                        self.progress.advance()
        finally:
            self.progress.finish()

        return count

    def sanitize_comment(self, comment: CommentRecord) -> CommentUpdate:
        """
        Rewrite a single comment's author fields.

        Args:
            comment: Comment as read from the store

        Returns:
            The update that was written

        Raises:
            RecordNotFoundError: If the comment or its post is gone
        """
        update = CommentUpdate(
            author=self.provider.name(),
            author_email=self.provider.safe_email(),
            author_url=self.provider.url(),
            author_ip=self.provider.ipv4(),
            agent=self.provider.user_agent(),
        )

        self.hooks.fire_comment(HookPoint.PRE_UPDATE_COMMENT, comment, update, self.provider)
        self.store.update_comment(comment.id, update)
        self.hooks.fire_comment(HookPoint.POST_UPDATE_COMMENT, comment, update, self.provider)

        return update
