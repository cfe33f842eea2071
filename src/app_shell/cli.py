import argparse
import logging
import os
import sys
from pathlib import Path

from src.adapters.auth.crypto import JWTAuthAdapter
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import (
    SQLiteDocumentRepo,
    SQLiteOptionsRepo,
    SQLitePostMetaRepo,
    SQLiteUserRepo,
)
from src.api.deps import Settings
from src.components.lifecycle import ActivateInput, UninstallInput, run_activate, run_uninstall
from src.domain.entities import Document, User
from src.rules.loader import load_rules
from src.rules.models import Rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def get_rules(settings: Settings) -> Rules:
    if not Path(settings.rules_path).exists():
        logger.error("Rules file %s not found.", settings.rules_path)
        sys.exit(1)
    return load_rules(Path(settings.rules_path))


def handle_migrate(settings: Settings, args: argparse.Namespace) -> None:
    os.makedirs(settings.data_dir, exist_ok=True)
    migrator = SQLiteMigrator(settings.db_path, args.migrations_dir)

    if args.status:
        pending = migrator.pending_migrations()
        print(f"{len(pending)} pending migration(s): {', '.join(pending) or 'none'}")
        return

    if args.rollback:
        reverted = migrator.rollback()
        print(f"Rolled back {reverted}." if reverted else "Nothing to roll back.")
        return

    applied = migrator.run_migrations()
    print(f"Applied {len(applied)} migration(s) to {settings.db_path}.")


def handle_activate(settings: Settings, args: argparse.Namespace) -> None:
    result = run_activate(ActivateInput(), options=SQLiteOptionsRepo(settings.db_path))
    if result.added:
        print(f"Added defaults: {', '.join(result.added)}")
    else:
        print("Defaults already present.")


def handle_uninstall(settings: Settings, args: argparse.Namespace) -> None:
    if not args.yes:
        logger.error("Uninstall deletes all SEO settings and metadata. Re-run with --yes.")
        sys.exit(1)

    result = run_uninstall(
        UninstallInput(),
        options=SQLiteOptionsRepo(settings.db_path),
        meta=SQLitePostMetaRepo(settings.db_path),
    )
    print(f"Removed {result.options_deleted} option(s) and {result.meta_deleted} meta row(s).")


def handle_create_user(settings: Settings, args: argparse.Namespace) -> None:
    rules = get_rules(settings)
    if args.role not in rules.rbac.roles:
        logger.error("Unknown role %s. Known roles: %s", args.role, ", ".join(rules.rbac.roles))
        sys.exit(1)

    repo = SQLiteUserRepo(settings.db_path)
    if repo.get_by_email(args.email):
        logger.error("User %s already exists.", args.email)
        sys.exit(1)

    user = repo.save(
        User(email=args.email, display_name=args.display_name or args.email, roles=[args.role])
    )
    token = JWTAuthAdapter().create_token(user.id, rules.security.sessions.ttl_minutes)
    print(f"User created: {user.email} ({args.role})")
    print(f"Token: {token}")


def handle_token(settings: Settings, args: argparse.Namespace) -> None:
    rules = get_rules(settings)
    user = SQLiteUserRepo(settings.db_path).get_by_email(args.email)
    if not user:
        logger.error("User %s not found.", args.email)
        sys.exit(1)

    token = JWTAuthAdapter().create_token(user.id, rules.security.sessions.ttl_minutes)
    print(f"Token: {token}")


def handle_add_document(settings: Settings, args: argparse.Namespace) -> None:
    repo = SQLiteDocumentRepo(settings.db_path)
    existing = repo.get_by_slug(args.slug)
    document_id = args.id or (existing.id if existing else _next_document_id(repo))
    home_url = (settings.home_url or "http://localhost:8000").rstrip("/")

    document = repo.save(
        Document(
            id=document_id,
            type=args.type,
            slug=args.slug,
            title=args.title,
            excerpt=args.excerpt,
            permalink=args.permalink or f"{home_url}/p/{args.slug}",
            author_name=args.author,
            featured_image_url=args.image,
        )
    )
    print(f"Saved {document.type} #{document.id}: {document.permalink}")


def _next_document_id(repo: SQLiteDocumentRepo) -> int:
    return max((d.id for d in repo.list_all()), default=0) + 1


def main() -> None:
    parser = argparse.ArgumentParser(description="DB SEO CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # migrate
    migrate_parser = subparsers.add_parser("migrate", help="Apply database migrations")
    migrate_parser.add_argument("--migrations-dir", default="migrations")
    migrate_group = migrate_parser.add_mutually_exclusive_group()
    migrate_group.add_argument("--status", action="store_true", help="List pending migrations")
    migrate_group.add_argument(
        "--rollback", action="store_true", help="Revert the last applied migration"
    )

    # activate
    subparsers.add_parser("activate", help="Add default SEO options if absent")

    # uninstall
    uninstall_parser = subparsers.add_parser(
        "uninstall", help="Delete all SEO options and document metadata"
    )
    uninstall_parser.add_argument("--yes", action="store_true", help="Confirm deletion")

    # create-user
    user_parser = subparsers.add_parser("create-user", help="Create a user and print a token")
    user_parser.add_argument("email")
    user_parser.add_argument("--role", default="admin", help="Role from rules.yaml rbac.roles")
    user_parser.add_argument("--display-name")

    # token
    token_parser = subparsers.add_parser("token", help="Issue an access token for a user")
    token_parser.add_argument("email")

    # add-document
    doc_parser = subparsers.add_parser("add-document", help="Create or update a document")
    doc_parser.add_argument("slug")
    doc_parser.add_argument("--title", required=True)
    doc_parser.add_argument("--type", choices=["post", "page"], default="post")
    doc_parser.add_argument("--id", type=int)
    doc_parser.add_argument("--excerpt", default="")
    doc_parser.add_argument("--permalink")
    doc_parser.add_argument("--author", default="")
    doc_parser.add_argument("--image", help="Featured image URL")

    args = parser.parse_args()

    settings = Settings()

    handlers = {
        "migrate": handle_migrate,
        "activate": handle_activate,
        "uninstall": handle_uninstall,
        "create-user": handle_create_user,
        "token": handle_token,
        "add-document": handle_add_document,
    }
    handlers[args.command](settings, args)


if __name__ == "__main__":
    main()
