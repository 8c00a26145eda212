"""Pytest configuration and shared fixtures."""

import pytest
import tempfile
from pathlib import Path
from typing import Generator, List

from gdpr_sanitizer.models import CommentRecord, CommentStatus, Site, UserRecord
from gdpr_sanitizer.sanitizers import SyntheticValueProvider
from gdpr_sanitizer.store import InMemoryRecordStore, SqlRecordStore


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_users() -> List[UserRecord]:
    """Three users; user 2 belongs to both sites of a multi-site store."""
    return [
        UserRecord(
            id=1,
            login="admin",
            nicename="admin",
            display_name="Site Admin",
            email="admin@corp.test",
            url="https://corp.test/",
            password_hash="$P$original-admin",
            site_ids=[1],
        ),
        UserRecord(
            id=2,
            login="jsmith",
            nicename="jsmith",
            display_name="Jöhn Real-Person",
            email="john.smith@mail.test",
            url="https://john.mail.test/",
            password_hash="$P$original-john",
            site_ids=[1, 2],
        ),
        UserRecord(
            id=3,
            login="mdoe",
            nicename="mdoe",
            display_name="Märy Real-Person",
            email="mary.doe@mail.test",
            url="https://mary.mail.test/",
            password_hash="$P$original-mary",
            site_ids=[2],
        ),
    ]


@pytest.fixture
def sample_comments() -> List[CommentRecord]:
    """One comment per status class."""
    return [
        CommentRecord(
            id=10,
            post_id=100,
            author="Jöhn Real-Person",
            author_email="john.smith@mail.test",
            author_url="https://john.mail.test/",
            author_ip="203.0.113.7",
            agent="RealBrowser/1.0",
            status=CommentStatus.PUBLISHED,
            content="Great post!",
        ),
        CommentRecord(
            id=11,
            post_id=100,
            author="Spam Real-Person",
            author_email="spam@mail.test",
            author_url="https://spam.mail.test/",
            author_ip="203.0.113.8",
            agent="RealBrowser/2.0",
            status=CommentStatus.SPAM,
            content="Buy now",
        ),
        CommentRecord(
            id=12,
            post_id=101,
            author="Märy Real-Person",
            author_email="mary.doe@mail.test",
            author_url="https://mary.mail.test/",
            author_ip="203.0.113.9",
            agent="RealBrowser/3.0",
            status=CommentStatus.TRASHED,
            content="Deleted remark",
        ),
    ]


@pytest.fixture
def memory_store(sample_users, sample_comments) -> InMemoryRecordStore:
    """Single-site in-memory store."""
    return InMemoryRecordStore(users=sample_users, comments=sample_comments)


@pytest.fixture
def multisite_store(sample_users, sample_comments) -> InMemoryRecordStore:
    """Two-site in-memory store: comments 10 and 11 on site 1, 12 on site 2."""
    comments = [
        sample_comments[0].model_copy(update={"site_id": 1}),
        sample_comments[1].model_copy(update={"site_id": 1}),
        sample_comments[2].model_copy(update={"site_id": 2}),
    ]
    return InMemoryRecordStore(
        users=sample_users,
        comments=comments,
        sites=[Site(id=1, domain="main.test"), Site(id=2, domain="second.test")],
    )


@pytest.fixture
def provider() -> SyntheticValueProvider:
    """Seeded value provider."""
    return SyntheticValueProvider(seed=1234)


def build_wordpress_db(database_url: str, multisite: bool = False) -> None:
    """
    Create and fill a WordPress-schema database.

    Single-site: users 1-3, comments 10 (approved), 11 (spam), 12 (trash).
    Multi-site adds site 2 with users 2 and 3 as members and comment 20.
    """
    store = SqlRecordStore(database_url)
    store.create_schema(site_ids=[1, 2] if multisite else [])

    with store.engine.begin() as conn:
        conn.execute(
            store.table("users").insert(),
            [
                {"ID": 1, "user_login": "admin", "user_pass": "$P$a", "user_nicename": "admin",
                 "user_email": "admin@corp.test", "user_url": "https://corp.test/",
                 "display_name": "Site Admin"},
                {"ID": 2, "user_login": "jsmith", "user_pass": "$P$b", "user_nicename": "jsmith",
                 "user_email": "john.smith@mail.test", "user_url": "https://john.mail.test/",
                 "display_name": "Jöhn Real-Person"},
                {"ID": 3, "user_login": "mdoe", "user_pass": "$P$c", "user_nicename": "mdoe",
                 "user_email": "mary.doe@mail.test", "user_url": "https://mary.mail.test/",
                 "display_name": "Märy Real-Person"},
            ],
        )
        conn.execute(store.table("posts", 1).insert(), [{"ID": 100}, {"ID": 101}])
        conn.execute(
            store.table("comments", 1).insert(),
            [
                {"comment_ID": 10, "comment_post_ID": 100, "comment_author": "Jöhn Real-Person",
                 "comment_author_email": "john.smith@mail.test",
                 "comment_author_url": "https://john.mail.test/",
                 "comment_author_IP": "203.0.113.7", "comment_agent": "RealBrowser/1.0",
                 "comment_approved": "1", "comment_content": "Great post!"},
                {"comment_ID": 11, "comment_post_ID": 100, "comment_author": "Spam Real-Person",
                 "comment_author_email": "spam@mail.test",
                 "comment_author_url": "https://spam.mail.test/",
                 "comment_author_IP": "203.0.113.8", "comment_agent": "RealBrowser/2.0",
                 "comment_approved": "spam", "comment_content": "Buy now"},
                {"comment_ID": 12, "comment_post_ID": 101, "comment_author": "Märy Real-Person",
                 "comment_author_email": "mary.doe@mail.test",
                 "comment_author_url": "https://mary.mail.test/",
                 "comment_author_IP": "203.0.113.9", "comment_agent": "RealBrowser/3.0",
                 "comment_approved": "trash", "comment_content": "Deleted remark"},
            ],
        )

        if multisite:
            conn.execute(
                store.table("blogs").insert(),
                [
                    {"blog_id": 1, "domain": "main.test", "path": "/"},
                    {"blog_id": 2, "domain": "main.test", "path": "/second/"},
                ],
            )
            conn.execute(
                store.table("usermeta").insert(),
                [
                    {"user_id": 1, "meta_key": "wp_capabilities", "meta_value": "a:0:{}"},
                    {"user_id": 2, "meta_key": "wp_capabilities", "meta_value": "a:0:{}"},
                    {"user_id": 2, "meta_key": "wp_2_capabilities", "meta_value": "a:0:{}"},
                    {"user_id": 3, "meta_key": "wp_2_capabilities", "meta_value": "a:0:{}"},
                ],
            )
            conn.execute(store.table("posts", 2).insert(), [{"ID": 200}])
            conn.execute(
                store.table("comments", 2).insert(),
                [
                    {"comment_ID": 20, "comment_post_ID": 200, "comment_author": "Second Real-Person",
                     "comment_author_email": "second@mail.test",
                     "comment_author_url": "https://second.mail.test/",
                     "comment_author_IP": "203.0.113.20", "comment_agent": "RealBrowser/4.0",
                     "comment_approved": "0", "comment_content": "Held for moderation"},
                ],
            )

    store.close()


@pytest.fixture
def wp_database(temp_dir: Path) -> str:
    """URL of a filled single-site SQLite database."""
    url = f"sqlite:///{temp_dir / 'wordpress.db'}"
    build_wordpress_db(url)
    return url


@pytest.fixture
def wp_multisite_database(temp_dir: Path) -> str:
    """URL of a filled two-site SQLite database."""
    url = f"sqlite:///{temp_dir / 'wordpress_multisite.db'}"
    build_wordpress_db(url, multisite=True)
    return url
