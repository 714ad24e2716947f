import os
import click
from flask import current_app
from flask.cli import with_appcontext
from flask_migrate import upgrade as alembic_upgrade, stamp as alembic_stamp, migrate as alembic_migrate
from werkzeug.security import generate_password_hash
from app.auth.permissions import ROLES
from app.utils.db import transactional
from models import db
from models.cart import Cart
from models.user import UserProfile, Seller


def _assert_safe_for_upgrade():
    # Prevent accidental prod upgrades unless explicitly allowed
    env = (current_app.config.get("ENV") or "").lower()
    app_env = (os.getenv("APP_ENV") or "").lower()
    if app_env == "production" or env == "production":
        if (os.getenv("ALLOW_DB_MIGRATIONS") or "").lower() not in ("1", "true", "yes"):
            raise click.ClickException("Refusing to run DB migration in production without ALLOW_DB_MIGRATIONS=true")


@click.command("db-migrate-safe")
@click.option("-m", "--message", default="auto migration", help="Migration message")
@with_appcontext
def db_migrate_safe(message):
    """Generate a new migration script from current models."""
    alembic_migrate(message=message)
    click.echo("Migration script generated.")


@click.command("db-upgrade-safe")
@with_appcontext
def db_upgrade_safe():
    """Apply migrations to the configured database."""
    _assert_safe_for_upgrade()
    alembic_upgrade()
    click.echo("Database upgraded.")


@click.command("db-stamp-safe")
@click.option("--revision", default="head", help="Revision to stamp, default 'head'")
@with_appcontext
def db_stamp_safe(revision):
    """Mark the database at a given revision without running migrations."""
    _assert_safe_for_upgrade()
    alembic_stamp(revision)
    click.echo(f"Database stamped at {revision}.")


@click.command("create-user")
@click.argument("email")
@click.password_option()
@click.option("--role", type=click.Choice(ROLES), default="buyer", show_default=True)
@click.option("--business-name", default=None, help="Storefront name, required for sellers")
@with_appcontext
def create_user(email, password, role, business_name):
    """Create a user account, with a storefront when the role is seller."""
    email = email.strip().lower()
    if UserProfile.query.filter_by(email=email).first():
        raise click.ClickException(f"{email} is already registered")
    if role == "seller" and not business_name:
        raise click.ClickException("--business-name is required for sellers")
    user = UserProfile(email=email, password_hash=generate_password_hash(password), role=role)
    with transactional("Failed to create user"):
        db.session.add(user)
        db.session.flush()
        db.session.add(Cart(user_id=user.id))
        if role == "seller":
            db.session.add(Seller(user_id=user.id, business_name=business_name))
    click.echo(f"Created {role} {user.id}")


def register_cli(app):
    app.cli.add_command(db_migrate_safe)
    app.cli.add_command(db_upgrade_safe)
    app.cli.add_command(db_stamp_safe)
    app.cli.add_command(create_user)

