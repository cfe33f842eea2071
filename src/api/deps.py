import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.adapters.auth.crypto import JWTAuthAdapter, JWTNonceAdapter
from src.adapters.sqlite.repos import (
    SQLiteDocumentRepo,
    SQLiteOptionsRepo,
    SQLitePostMetaRepo,
    SQLiteUserRepo,
)
from src.components.render import RenderOrchestrator, create_render_orchestrator
from src.components.settings import SettingsService, build_rules
from src.domain.entities import SiteInfo, User
from src.domain.policy import PolicyEngine
from src.rules.loader import load_rules
from src.rules.models import Rules
from src.shell.hooks.filters import FilterRegistry, create_filter_registry


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = os.environ.get("DB_SEO_DATA_DIR", "./data")
        self.db_path = f"{self.data_dir}/db_seo.db"
        self.rules_path = Path(os.environ.get("DB_SEO_RULES_PATH", str(self.base_dir / "rules.yaml")))
        self.migrations_dir = str(self.base_dir / "migrations")
        self.site_name = os.environ.get("DB_SEO_SITE_NAME", "My Site")
        self.site_description = os.environ.get("DB_SEO_SITE_DESCRIPTION", "")
        # Empty home URL means "derive from the incoming request"
        self.home_url = os.environ.get("DB_SEO_HOME_URL", "")
        self.logo_url = os.environ.get("DB_SEO_SITE_LOGO") or None


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


# --- Repos ---
def get_options_repo(settings: Settings = Depends(get_settings)) -> SQLiteOptionsRepo:
    return SQLiteOptionsRepo(settings.db_path)


def get_post_meta_repo(settings: Settings = Depends(get_settings)) -> SQLitePostMetaRepo:
    return SQLitePostMetaRepo(settings.db_path)


def get_document_repo(settings: Settings = Depends(get_settings)) -> SQLiteDocumentRepo:
    return SQLiteDocumentRepo(settings.db_path)


def get_user_repo(settings: Settings = Depends(get_settings)) -> SQLiteUserRepo:
    return SQLiteUserRepo(settings.db_path)


# --- Component Services ---
def get_settings_service(
    repo: SQLiteOptionsRepo = Depends(get_options_repo),
    rules: Rules = Depends(get_rules),
) -> SettingsService:
    """Get settings component service."""
    return SettingsService(repo=repo, rules=build_rules(rules.seo))


# Filter registry singleton: extensions register once per process
_filter_registry_instance: FilterRegistry | None = None


def get_filter_registry() -> FilterRegistry:
    """Get filter registry singleton."""
    global _filter_registry_instance
    if _filter_registry_instance is None:
        _filter_registry_instance = create_filter_registry()
    return _filter_registry_instance


def get_render_orchestrator(
    options: SQLiteOptionsRepo = Depends(get_options_repo),
    meta: SQLitePostMetaRepo = Depends(get_post_meta_repo),
    filters: FilterRegistry = Depends(get_filter_registry),
) -> RenderOrchestrator:
    return create_render_orchestrator(options, meta, filters)


def get_site_info(request: Request, settings: Settings = Depends(get_settings)) -> SiteInfo:
    home_url = settings.home_url or str(request.base_url)
    return SiteInfo(
        name=settings.site_name,
        description=settings.site_description,
        home_url=home_url.rstrip("/") + "/",
        logo_url=settings.logo_url,
    )


# --- Services ---
def get_policy(rules: Rules = Depends(get_rules)) -> PolicyEngine:
    return PolicyEngine(rules)


def get_nonce_adapter(rules: Rules = Depends(get_rules)) -> JWTNonceAdapter:
    return JWTNonceAdapter(ttl_minutes=rules.security.nonce.ttl_minutes)


def get_auth_adapter() -> JWTAuthAdapter:
    return JWTAuthAdapter()


# --- Auth ---
# Tokens are issued by the CLI (create-user, token); there is no login route
bearer_scheme = HTTPBearer(auto_error=False, description="Access token from `db-seo token`")


def _resolve_token(
    request: Request, credentials: HTTPAuthorizationCredentials | None
) -> str | None:
    # Cookie (HttpOnly) wins over the Authorization header
    cookie_token = request.cookies.get("access_token")
    if cookie_token and cookie_token.startswith("Bearer "):
        return cookie_token.split(" ")[1]
    return credentials.credentials if credentials else None


def _load_user(token: str, user_repo: SQLiteUserRepo, auth: JWTAuthAdapter) -> User | None:
    user_id = auth.validate_token(token)
    if user_id is None or not isinstance(user_id, str):
        return None

    try:
        return user_repo.get_by_id(UUID(user_id))
    except ValueError:
        return None


async def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
    auth: JWTAuthAdapter = Depends(get_auth_adapter),
) -> User:
    token = _resolve_token(request, credentials)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = _load_user(token, user_repo, auth)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if user.status != "active":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )

    return user


async def get_optional_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
    auth: JWTAuthAdapter = Depends(get_auth_adapter),
) -> User | None:
    """Current user, or None when the request carries no valid token."""
    token = _resolve_token(request, credentials)
    if not token:
        return None
    user = _load_user(token, user_repo, auth)
    if user is None or user.status != "active":
        return None
    return user


def require_manage_options(
    current_user: User = Depends(get_current_user),
    policy: PolicyEngine = Depends(get_policy),
) -> User:
    """Settings screens are limited to users with manage_options."""
    if not policy.can(current_user, "manage_options"):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have permission to manage SEO settings",
        )
    return current_user
