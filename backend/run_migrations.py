#!/usr/bin/env python3
"""
Database migration runner.

Applies the SQL files in migrations/ to the Postgres database behind
Supabase, in filename order, recording each one in a tracking table.

Usage:
    python run_migrations.py              # Apply pending migrations
    python run_migrations.py --status     # Show migration status
    python run_migrations.py --dry-run    # Show what would run

Configuration:
    Set SUPABASE_DB_URL in your .env file (Supabase Dashboard → Settings →
    Database → Connection string → URI).
"""

import argparse
import hashlib
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS_TABLE = "_migrations"


@dataclass(frozen=True)
class Migration:
    """A migration file on disk."""

    name: str
    path: Path
    checksum: str


def checksum(content: str) -> str:
    """Short content hash used to detect edited migrations."""
    return hashlib.sha256(content.encode()).hexdigest()[:16]


def discover_migrations(directory: Path = MIGRATIONS_DIR) -> list[Migration]:
    """List migration files in apply order."""
    if not directory.exists():
        return []
    return [
        Migration(name=path.name, path=path, checksum=checksum(path.read_text()))
        for path in sorted(directory.glob("*.sql"))
    ]


def plan(
    migrations: list[Migration], applied: dict[str, str]
) -> tuple[list[Migration], list[Migration]]:
    """
    Split migrations into pending and changed-since-applied.

    Args:
        migrations: Files on disk
        applied: Applied migration name -> recorded checksum

    Returns:
        (pending, changed)
    """
    pending = [m for m in migrations if m.name not in applied]
    changed = [
        m for m in migrations
        if m.name in applied and applied[m.name] != m.checksum
    ]
    return pending, changed


def connect(db_url: Optional[str] = None):
    """Open a connection to the database, exiting with a hint if unset."""
    db_url = db_url or get_settings().supabase_db_url
    if not db_url:
        console.print("[red]Error:[/red] SUPABASE_DB_URL is not set.")
        sys.exit(1)
    try:
        return psycopg2.connect(db_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def ensure_migrations_table(conn) -> None:
    """Create the tracking table if it doesn't exist."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL(
                """
                CREATE TABLE IF NOT EXISTS {} (
                    id SERIAL PRIMARY KEY,
                    name VARCHAR(255) NOT NULL UNIQUE,
                    checksum VARCHAR(64) NOT NULL,
                    applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                )
                """
            ).format(sql.Identifier(MIGRATIONS_TABLE))
        )
    conn.commit()


def applied_migrations(conn) -> dict[str, tuple[str, object]]:
    """Applied migration name -> (checksum, applied_at)."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("SELECT name, checksum, applied_at FROM {} ORDER BY name").format(
                sql.Identifier(MIGRATIONS_TABLE)
            )
        )
        return {name: (digest, applied_at) for name, digest, applied_at in cur.fetchall()}


def apply(conn, migration: Migration) -> None:
    """Run one migration and record it, in a single transaction."""
    console.print(f"[blue]Running:[/blue] {migration.name}...")
    try:
        with conn.cursor() as cur:
            cur.execute(migration.path.read_text())
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(MIGRATIONS_TABLE)
                ),
                (migration.name, migration.checksum),
            )
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {migration.name} failed: {e}")
        raise
    console.print(f"[green]✓[/green] {migration.name} applied")


def show_status(applied: dict[str, tuple[str, object]], pending: list[Migration]) -> None:
    """Print applied and pending migrations as a table."""
    if not applied and not pending:
        console.print("[dim]No migrations found.[/dim]")
        return

    table = Table(title="Migration Status")
    table.add_column("Migration", style="cyan")
    table.add_column("Status")
    table.add_column("Applied At")
    table.add_column("Checksum")

    for name, (digest, applied_at) in applied.items():
        table.add_row(name, "[green]Applied[/green]", str(applied_at or ""), digest)
    for migration in pending:
        table.add_row(migration.name, "[yellow]Pending[/yellow]", "", migration.checksum)

    console.print(table)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Run database migrations")
    parser.add_argument("--status", action="store_true", help="Show migration status")
    parser.add_argument("--dry-run", action="store_true", help="Show what would run")
    args = parser.parse_args()

    conn = connect()
    try:
        ensure_migrations_table(conn)
        applied = applied_migrations(conn)
        pending, changed = plan(
            discover_migrations(),
            {name: digest for name, (digest, _) in applied.items()},
        )

        for migration in changed:
            console.print(
                f"[yellow]Warning:[/yellow] {migration.name} has changed since it was applied"
            )

        if args.status:
            show_status(applied, pending)
            return

        if not pending:
            console.print("[green]All migrations are up to date.[/green]")
            return

        for migration in pending:
            if args.dry_run:
                console.print(f"[cyan]Would run:[/cyan] {migration.name}")
            else:
                apply(conn, migration)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
