#!/usr/bin/env python3
"""
Ledgerly management CLI.

Usage:
    python manage.py serve             Start the API server
    python manage.py migrate           Apply database migrations
    python manage.py export-json PATH  Write every invoice to a JSON backup
    python manage.py import PATH       Import invoices from a .json or .csv file
    python manage.py status            Show database and invoice counter status
"""

import argparse
import asyncio
import subprocess
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent


async def _with_database(func: Callable[[], Awaitable[int]]) -> int:
    """Migrate, run ``func`` and close the pool afterwards."""
    from src.application.services import get_numbering_service
    from src.infrastructure.storage.sqlite import close_pool
    from src.infrastructure.storage.sqlite.migrations import run_migrations

    try:
        await run_migrations()
        await (await get_numbering_service()).reconcile()
        return await func()
    finally:
        await close_pool()


def cmd_serve(args: argparse.Namespace) -> int:
    """Run uvicorn in the foreground."""
    uvicorn_cmd = [
        sys.executable, "-m", "uvicorn",
        "src.api.main:app",
        "--host", args.host,
        "--port", str(args.port),
    ]
    if args.reload:
        uvicorn_cmd.append("--reload")

    print(f"Starting server on {args.host}:{args.port}...")
    try:
        return subprocess.run(uvicorn_cmd, cwd=str(ROOT_DIR)).returncode
    except KeyboardInterrupt:
        print("\nServer stopped.")
        return 0


def cmd_migrate(args: argparse.Namespace) -> int:
    """Apply pending migrations."""
    from src.infrastructure.storage.sqlite.migrations import run_migrations

    async def _run() -> int:
        results = await run_migrations(create_backup_before=not args.no_backup)
        applied = [r for r in results if r.success]
        failed = [r for r in results if not r.success]
        for r in applied:
            print(f"  applied {r.version} ({r.execution_time_ms:.0f}ms)")
        for r in failed:
            print(f"  FAILED  {r.version}: {r.error}")
        if not results:
            print("Database is up to date.")
        return 1 if failed else 0

    return asyncio.run(_run())


def cmd_export_json(args: argparse.Namespace) -> int:
    """Write a JSON backup of all invoices."""
    from src.application.use_cases import ExportInvoicesUseCase

    async def _run() -> int:
        document = await ExportInvoicesUseCase().export_json()
        target = Path(args.path)
        if target.is_dir():
            target = target / document.filename
        target.write_bytes(document.content)
        print(f"Exported invoices to {target} ({document.size} bytes).")
        return 0

    return asyncio.run(_with_database(_run))


def cmd_import(args: argparse.Namespace) -> int:
    """Import invoices from a JSON export or CSV file."""
    from src.application.use_cases import ImportInvoicesUseCase

    source = Path(args.path)
    if not source.is_file():
        print(f"Error: {source} not found.")
        return 1

    suffix = source.suffix.lower()
    if suffix not in (".json", ".csv"):
        print("Error: import file must end in .json or .csv.")
        return 1

    async def _run() -> int:
        result = await ImportInvoicesUseCase().execute(
            source.read_bytes(), "json" if suffix == ".json" else "csv"
        )
        print(result.message)
        for number in result.invoice_numbers:
            print(f"  {number}")
        return 0 if result.success else 1

    return asyncio.run(_with_database(_run))


def cmd_status(args: argparse.Namespace) -> int:
    """Print database location, schema version, next invoice number and integrity checks."""
    from src.application.services import get_numbering_service
    from src.config import get_settings
    from src.infrastructure.storage.sqlite.migrations import (
        get_migration_status,
        verify_schema_integrity,
    )

    settings = get_settings()

    async def _run() -> int:
        status = await get_migration_status()
        numbering = await get_numbering_service()
        counter = await numbering.current()
        print(f"Database:       {settings.storage.db_path}")
        print(f"Schema version: {status.get('current_version') or 'none'}")
        print(f"Pending:        {len(status.get('pending_migrations', []))} migration(s)")
        print(f"Counter:        {counter}")
        print(f"Next number:    {numbering.format(None, counter)}")
        checks = await verify_schema_integrity()
        for check in checks:
            print(f"Check {check['check']:<16}{check['status']}")
        return 0 if all(c["status"] == "PASS" for c in checks) else 1

    return asyncio.run(_with_database(_run))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Ledgerly management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    p_serve.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    # migrate
    p_migrate = sub.add_parser("migrate", help="Apply database migrations")
    p_migrate.add_argument("--no-backup", action="store_true", help="Skip the pre-migration backup")
    p_migrate.set_defaults(func=cmd_migrate)

    # export-json
    p_export = sub.add_parser("export-json", help="Export all invoices as JSON")
    p_export.add_argument("path", help="Output file or directory")
    p_export.set_defaults(func=cmd_export_json)

    # import
    p_import = sub.add_parser("import", help="Import invoices from .json or .csv")
    p_import.add_argument("path", help="File to import")
    p_import.set_defaults(func=cmd_import)

    # status
    p_status = sub.add_parser("status", help="Show database and counter status")
    p_status.set_defaults(func=cmd_status)

    args = parser.parse_args()
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
