"""Data models for stored records and their replacement values."""

from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class CommentStatus(str, Enum):
    """Comment status classes covered by a run."""

    PUBLISHED = "published"
    SPAM = "spam"
    TRASHED = "trash"


class UserLookup(str, Enum):
    """Fields a user can be looked up by."""

    ID = "id"
    LOGIN = "login"
    EMAIL = "email"


class Site(BaseModel):
    """A partition of a multi-site store."""

    id: int = Field(..., description="Site identifier")
    domain: str = Field("", description="Site domain")
    path: str = Field("/", description="Site path")


class UserRecord(BaseModel):
    """A stored user profile."""

    id: int = Field(..., description="Immutable user identifier")
    login: str = Field(..., description="Unique login name")
    nicename: str = Field("", description="URL-friendly name")
    display_name: str = Field("", description="Public display name")
    email: str = Field("", description="Email address")
    url: str = Field("", description="Website URL")
    password_hash: str = Field("", description="Stored password hash")
    site_ids: List[int] = Field(default_factory=list, description="Sites the user belongs to")


class CommentRecord(BaseModel):
    """A stored comment."""

    id: int = Field(..., description="Immutable comment identifier")
    post_id: int = Field(0, description="Parent content identifier")
    author: str = Field("", description="Author name")
    author_email: str = Field("", description="Author email")
    author_url: str = Field("", description="Author URL")
    author_ip: str = Field("", description="Author IP address")
    agent: str = Field("", description="Author user agent")
    status: CommentStatus = Field(CommentStatus.PUBLISHED, description="Status class")
    content: str = Field("", description="Comment body")
    site_id: Optional[int] = Field(None, description="Owning site, None on single-site stores")


class UserUpdate(BaseModel):
    """
    Primary fields written for a user.

    The login is not part of this structure; stores persist it through a
    separate call.
    """

    model_config = ConfigDict(extra="forbid")

    password: str
    nicename: str
    email: str
    url: str
    display_name: str
    meta: Dict[str, Any] = Field(default_factory=dict, description="Custom fields to overwrite")


class UserReplacement(BaseModel):
    """Everything that replaces a user's identifying data."""

    model_config = ConfigDict(extra="forbid")

    fields: UserUpdate
    login: str


class CommentUpdate(BaseModel):
    """Author fields written for a comment."""

    model_config = ConfigDict(extra="forbid")

    author: str
    author_email: str
    author_url: str
    author_ip: str
    agent: str
    meta: Dict[str, Any] = Field(default_factory=dict, description="Custom fields to overwrite")
