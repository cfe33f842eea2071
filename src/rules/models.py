from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.entities import OG_TYPES


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class NonceRules(BaseModel):
    action: str = "db_seo_save_meta_box"
    field_name: str = "db_seo_meta_box_nonce"
    ttl_minutes: int = Field(default=1440, gt=0)


class SessionsRules(BaseModel):
    ttl_minutes: int = Field(gt=0)


class SecurityRules(BaseModel):
    nonce: NonceRules = Field(default_factory=NonceRules)
    sessions: SessionsRules


class RbacRules(BaseModel):
    roles: dict[str, list[str]]

    def capabilities_for(self, roles: list[str]) -> set[str]:
        caps: set[str] = set()
        for role in roles:
            caps.update(self.roles.get(role, []))
        return caps


class FieldLimits(BaseModel):
    custom_title_max: int = 200
    description_max: int = 500
    twitter_handle_max: int = 16
    url_max: int = 2048


class SeoRules(BaseModel):
    og_types: list[str] = Field(default_factory=lambda: list(OG_TYPES))
    meta_box_post_types: list[str] = Field(default_factory=lambda: ["post", "page"])
    limits: FieldLimits = Field(default_factory=FieldLimits)

    @field_validator("og_types")
    @classmethod
    def _known_og_types(cls, value: list[str]) -> list[str]:
        unknown = [v for v in value if v not in OG_TYPES]
        if unknown:
            raise ValueError(f"unknown og types: {', '.join(unknown)}")
        return value


class Rules(BaseModel):
    project: ProjectRules
    security: SecurityRules
    rbac: RbacRules
    seo: SeoRules = Field(default_factory=SeoRules)

    model_config = ConfigDict(extra="forbid")
