"""Command-line interface for GDPR Sanitizer."""

from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from gdpr_sanitizer import __version__
from gdpr_sanitizer.errors import InputError
from gdpr_sanitizer.models import RunResult, get_settings
from gdpr_sanitizer.sanitizers import (
    ExclusionResolver,
    RichProgressReporter,
    SanitizationEngine,
    SanitizerHooks,
    SyntheticValueProvider,
    UniqueLoginGenerator,
    load_hook_module,
)
from gdpr_sanitizer.store import RecordStore, SqlRecordStore
from gdpr_sanitizer.utils import AuditLogger, get_logger, setup_logging

app = typer.Typer(
    name="gdpr-sanitizer",
    help="Rewrite personally identifying information in user profiles and comments",
    rich_markup_mode=None,
)
console = Console()
logger = get_logger(__name__)


@app.command()
def sanitize(
    args: Optional[List[str]] = typer.Argument(None, hidden=True),
    keep: Optional[str] = typer.Option(
        None, "--keep", help="User ids, logins and/or emails to skip, comma-separated"
    ),
    skip_not_found: bool = typer.Option(
        False, "--skip-not-found", help="Skip users to keep if not found, fail otherwise"
    ),
    site: Optional[str] = typer.Option(None, "--site", help="Site id to limit rewrites to"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
    database_url: Optional[str] = typer.Option(
        None, "--database-url", "-d", help="SQLAlchemy database URL (default: DATABASE_URL)"
    ),
    table_prefix: Optional[str] = typer.Option(None, "--table-prefix", help="Base table prefix"),
    hooks: Optional[List[str]] = typer.Option(
        None, "--hooks", help="Module defining register_hooks(hooks); repeatable"
    ),
    audit_file: Optional[str] = typer.Option(None, "--audit-file", help="Audit log path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """
    Rewrite PII in all user profiles and comments.

    Example:
        gdpr-sanitizer sanitize
        gdpr-sanitizer sanitize --keep=1
        gdpr-sanitizer sanitize --keep="2,admin,test@example.com" --skip-not-found
        gdpr-sanitizer sanitize --site=3
    """
    if verbose:
        setup_logging(log_level="DEBUG")
    else:
        setup_logging(log_level="INFO")

    settings = get_settings()

    console.print("\n[bold blue]GDPR Sanitizer[/bold blue]")

    if args:
        console.print(f"[yellow]Warning:[/yellow] unknown argument: {' '.join(args)}")

    database_url = database_url or settings.database_url
    if not database_url:
        console.print("[bold red]Error:[/bold red] No database configured (use --database-url)")
        raise typer.Exit(1)

    resource = _display_url(database_url)
    console.print(f"Database: {resource}\n")

    audit = None
    if audit_file or settings.audit_enabled:
        audit = AuditLogger(audit_file or settings.audit_file)

    try:
        with _open_store(database_url, table_prefix or settings.table_prefix) as store:
            site_id = _parse_site(site, store)

            hook_registry = SanitizerHooks()
            for module_path in hooks or []:
                load_hook_module(module_path, hook_registry)

            provider = SyntheticValueProvider(settings.faker_locale, settings.faker_seed)
            engine = SanitizationEngine(
                store,
                provider=provider,
                hooks=hook_registry,
                login_generator=UniqueLoginGenerator(
                    store,
                    provider,
                    max_attempts=settings.login_max_attempts,
                    suffix_after=settings.login_suffix_after,
                    suffix_digits=settings.login_suffix_digits,
                ),
                progress=RichProgressReporter(console),
            )
            engine.resolve_scope(site_id)

            resolver = ExclusionResolver(store, skip_not_found=skip_not_found)
            excluded = resolver.resolve(keep)
            for token in resolver.not_found:
                console.print(f"[yellow]Warning:[/yellow] user to keep not found, skipping: {token}")

            if not yes:
                typer.confirm("Rewrite all user data?", abort=True)

            if audit:
                audit.log_run_started(resource, excluded, site_id)

            result = engine.run(excluded, site_id)

    except typer.Abort:
        if audit:
            audit.log_run_aborted(resource)
        raise

    except InputError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        if audit:
            audit.log_run_failed(resource, e)
        raise typer.Exit(1)

    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {str(e)}")
        logger.exception("Sanitization failed")
        if audit:
            audit.log_run_failed(resource, e)
        raise typer.Exit(1)

    if audit:
        audit.log_run_completed(
            resource,
            users_updated=result.users_updated,
            comments_updated=result.comments_updated,
            duration_seconds=result.duration_seconds,
            details={"comments_skipped": result.comments_skipped},
        )

    _display_results(result)


def _open_store(database_url: str, table_prefix: str) -> RecordStore:
    """Open the record store behind a database URL."""
    return SqlRecordStore(database_url, table_prefix=table_prefix)


def _parse_site(site: Optional[str], store: RecordStore) -> Optional[int]:
    """
    Validate the --site value against the store.

    Raises:
        InputError: If the store is single-site or the value is not a number
    """
    if site is None:
        return None
    if not store.is_multisite():
        raise InputError("site parameter only valid on multi-site installs.")
    if not (site.strip().isascii() and site.strip().isdigit()):
        raise InputError("site must be a number")
    return int(site)


def _display_url(database_url: str) -> str:
    """Database URL without credentials."""
    return database_url.split("@")[-1] if "@" in database_url else database_url


def _display_results(result: RunResult) -> None:
    """Display run counts and the success message."""
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")

    table = Table()
    table.add_column("Updated", style="bold")
    table.add_column("Count", justify="right")
    table.add_row("Users", str(result.users_updated))
    table.add_row("Comments", str(result.comments_updated))
    console.print(table)

    if result.comments_skipped:
        console.print(f"[yellow]Skipped {result.comments_skipped} comments that disappeared[/yellow]")

    console.print(f"[green]Success:[/green] {result.success_message()}")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]GDPR Sanitizer[/bold] v{__version__}")
    console.print("Rewrites PII in user profiles and comments with synthetic data")


if __name__ == "__main__":
    app()
