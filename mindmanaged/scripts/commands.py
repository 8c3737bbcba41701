"""Maintenance CLI commands.

Usage:
    flask init-db                 # create tables directly (dev/test databases)
    flask check-db                # verify the database answers a trivial query
    flask check-medications       # probe the openFDA endpoint
    flask seed-demo --email demo@mindmanaged.test --password demo12345
"""

from __future__ import annotations

from datetime import datetime, timedelta

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy import text

from mindmanaged.extensions import db


@click.command("init-db")
@click.option("--drop", is_flag=True, help="Drop existing tables first")
@with_appcontext
def init_db_command(drop: bool):
    """Create all tables from the model metadata."""
    if drop:
        click.confirm("This deletes all data. Continue?", abort=True)
        db.drop_all()
        click.echo("Dropped all tables.")
    db.create_all()
    click.echo("✓ Database tables created")


@click.command("check-db")
@with_appcontext
def check_db_command():
    """Run ``SELECT 1`` and report the user count."""
    from mindmanaged.core.users.models import User

    try:
        db.session.execute(text("SELECT 1"))
        users = db.session.query(User.id).count()
    except Exception as e:
        click.echo(f"✗ Database check failed: {e}", err=True)
        raise click.Abort() from e
    click.echo(f"✓ Database reachable ({users} users)")


@click.command("check-medications")
@with_appcontext
def check_medications_command():
    """Probe the medication search API with a one-result lookup."""
    from mindmanaged.domains.medications.services.medication_service import (
        MedicationApiSettings,
        MedicationSearchError,
        check_connection,
    )

    settings = MedicationApiSettings.from_config(current_app.config)
    click.echo(f"API URL: {settings.url}")
    click.echo(f"API key configured: {'yes' if settings.api_key else 'no'}")
    try:
        count = check_connection(settings)
    except MedicationSearchError as e:
        click.echo(f"✗ {e.message} ({e.detail or e.code})", err=True)
        raise click.Abort() from e
    click.echo(f"✓ Medication API reachable ({count} test results)")


@click.command("seed-demo")
@click.option("--email", default="demo@mindmanaged.test", show_default=True)
@click.option("--password", default="demo12345", show_default=True)
@with_appcontext
def seed_demo_command(email: str, password: str):
    """Create a demo user with a few tasks, journal entries and mood check-ins."""
    from mindmanaged.core.auth.password import hash_password
    from mindmanaged.core.users.services import find_by_email
    from mindmanaged.core.users.models import User
    from mindmanaged.domains.journal.services import create_entry
    from mindmanaged.domains.mood.services import create_checkin
    from mindmanaged.domains.tasks.services import create_task, update_task

    user = find_by_email(email)
    if user:
        click.echo(f"Demo user already exists: {user.email} (id={user.id})")
        return

    user = User(name="Demo User", email=email.strip().lower(), password_hash=hash_password(password), preferences={})
    db.session.add(user)
    db.session.commit()

    now = datetime.utcnow()
    task_defs = [
        ("Write weekly report", "work", "high", now + timedelta(days=2)),
        ("Book dentist appointment", "health", "medium", now + timedelta(days=7)),
        ("Read two chapters", "learning", "low", None),
        ("Pay electricity bill", "personal", "urgent", now - timedelta(days=1)),
    ]
    tasks = [
        create_task(user.id, title=title, category=category, priority=priority, due_date=due)
        for title, category, priority, due in task_defs
    ]
    update_task(user.id, tasks[2].id, status="completed", actual_time=45)

    create_entry(user.id, title="First entry", entry="Started using Mind Managed today.", date=now - timedelta(days=1))
    create_entry(user.id, title="Small wins", entry="Finished the book chapters I planned.", date=now)

    for days_ago, mood in ((2, "okay"), (1, "not_great"), (0, "great")):
        create_checkin(user.id, mood=mood, logged_at=now - timedelta(days=days_ago))

    click.echo(f"✓ Seeded demo user {user.email} / {password} (id={user.id})")


def register_commands(app):
    """Register CLI commands with the app."""
    app.cli.add_command(init_db_command)
    app.cli.add_command(check_db_command)
    app.cli.add_command(check_medications_command)
    app.cli.add_command(seed_demo_command)
