from datetime import datetime
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
RoleType = Literal["owner", "admin", "editor", "author", "viewer"]
DocumentType = Literal["post", "page"]
OgType = Literal["website", "article", "profile", "video", "book"]

OG_TYPES: tuple[str, ...] = ("website", "article", "profile", "video", "book")

# --- Option / Meta Keys ---

OPTION_OG_ENABLED = "db_seo_og_enabled"
OPTION_TWITTER_ENABLED = "db_seo_twitter_enabled"
OPTION_SCHEMA_ENABLED = "db_seo_schema_enabled"
OPTION_DEFAULT_IMAGE = "db_seo_default_image"
OPTION_TWITTER_HANDLE = "db_seo_twitter_handle"
OPTION_OG_TYPE = "db_seo_og_type"
OPTION_DEFAULT_META_DESCRIPTION = "db_seo_default_meta_description"

OPTION_KEYS: tuple[str, ...] = (
    OPTION_OG_ENABLED,
    OPTION_TWITTER_ENABLED,
    OPTION_SCHEMA_ENABLED,
    OPTION_DEFAULT_IMAGE,
    OPTION_TWITTER_HANDLE,
    OPTION_OG_TYPE,
    OPTION_DEFAULT_META_DESCRIPTION,
)

META_PREFIX = "_db_seo_"
META_CUSTOM_TITLE = "_db_seo_custom_meta_title"
META_CUSTOM_DESCRIPTION = "_db_seo_custom_meta_description"
META_CUSTOM_IMAGE = "_db_seo_custom_image"
META_OG_TYPE = "_db_seo_og_type"

# --- User & Auth ---


class User(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    email: str
    display_name: str
    roles: list[RoleType] = Field(default_factory=list)
    status: Literal["active", "disabled"] = "active"
    created_at: datetime = Field(default_factory=datetime.utcnow)


# --- Host Platform ---


class SiteInfo(BaseModel):
    name: str
    description: str = ""
    home_url: str
    logo_url: str | None = None  # Configured site logo, if any


class Document(BaseModel):
    id: int
    type: DocumentType = "post"
    slug: str
    title: str
    excerpt: str = ""
    permalink: str
    author_name: str = ""
    featured_image_url: str | None = None
    published_at: datetime = Field(default_factory=datetime.utcnow)
    modified_at: datetime = Field(default_factory=datetime.utcnow)


# --- SEO Configuration ---


class SeoSettings(BaseModel):
    og_enabled: bool = True
    twitter_enabled: bool = True
    schema_enabled: bool = True
    default_image_url: str | None = None
    twitter_handle: str | None = None
    default_og_type: OgType = "website"
    default_meta_description: str | None = None


class DocumentMeta(BaseModel):
    custom_title: str | None = None
    custom_description: str | None = None
    custom_image_url: str | None = None
    og_type: str | None = None


# --- Request Context ---


class RenderContext(BaseModel):
    """What the host knows about the page being rendered."""

    site: SiteInfo
    document: Document | None = None
    is_singular: bool = False
    is_front_page: bool = False
    document_title: str = ""  # Full <title> text as the host would print it

    @property
    def document_id(self) -> int | None:
        return self.document.id if self.document else None
