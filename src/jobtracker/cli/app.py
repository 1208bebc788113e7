from __future__ import annotations

import json
from datetime import UTC, datetime

import typer
import uvicorn

from jobtracker.api.app import create_app
from jobtracker.api.schemas import ApplicationResponse
from jobtracker.config import get_settings
from jobtracker.core.security import hash_password
from jobtracker.db.init import init_database
from jobtracker.db.repositories import Repository
from jobtracker.db.session import SessionLocal
from jobtracker.logging_config import configure_logging

app = typer.Typer(help="Job application tracker CLI")
user_app = typer.Typer(help="Manage user accounts")
applications_app = typer.Typer(help="Inspect tracked applications")

app.add_typer(user_app, name="user")
app.add_typer(applications_app, name="applications")

_INITIALIZED = False


def ensure_initialized() -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return
    init_database()
    _INITIALIZED = True


@app.command("init")
def init_cmd() -> None:
    """Create the data directory and database tables."""
    configure_logging()
    result = init_database()
    typer.echo(json.dumps({"ok": True, **result}, indent=2))


@user_app.command("create")
def user_create(
    username: str = typer.Option(..., "--username"),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
    create_time: str = typer.Option("", "--create-time"),
) -> None:
    configure_logging()
    ensure_initialized()
    settings = get_settings()
    with SessionLocal() as db:
        repo = Repository(db)
        if repo.get_user_by_username(username):
            raise typer.BadParameter(f"user {username!r} already exists")
        user = repo.create_user(
            username=username,
            password_hash=hash_password(password, rounds=settings.bcrypt_rounds),
            create_time=create_time or datetime.now(UTC).isoformat(),
        )
        typer.echo(json.dumps({"id": user.id, "username": user.username}, indent=2))


@user_app.command("set-resume-version")
def user_set_resume_version(
    username: str = typer.Option(..., "--username"),
    version: str = typer.Option(..., "--version"),
) -> None:
    """Set the resume version stamped on quick-added applications."""
    configure_logging()
    ensure_initialized()
    with SessionLocal() as db:
        repo = Repository(db)
        user = repo.get_user_by_username(username)
        if not user:
            raise typer.BadParameter(f"user {username!r} not found")
        config = repo.set_quick_add_resume_version(user.id, version or None)
        typer.echo(
            json.dumps(
                {"user_id": config.user_id, "quickAddResumeVersion": config.quick_add_resume_version},
                indent=2,
            )
        )


@applications_app.command("list")
def applications_list(username: str = typer.Option(..., "--username")) -> None:
    configure_logging()
    ensure_initialized()
    with SessionLocal() as db:
        repo = Repository(db)
        user = repo.get_user_by_username(username)
        if not user:
            raise typer.BadParameter(f"user {username!r} not found")
        rows = repo.list_applications(user.id)
        typer.echo(
            json.dumps([ApplicationResponse.model_validate(row).model_dump() for row in rows], indent=2)
        )


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host"),
    port: int | None = typer.Option(None, "--port"),
) -> None:
    configure_logging()
    ensure_initialized()
    settings = get_settings()
    app_instance = create_app()
    uvicorn.run(app_instance, host=host or settings.app_host, port=port or settings.app_port)
