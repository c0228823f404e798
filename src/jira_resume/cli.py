#!/usr/bin/env python3
"""
Jira Resume CLI

使用 Typer + Rich 管理 Jira 帳號、OpenRouter API Key，並生成工作報告
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Confirm, Prompt
from rich.table import Table

from .config import Config
from .errors import ConfigurationError, JiraResumeError
from .formatter import NO_WORKLOGS, render_table
from .models import (
    Account,
    DateRangeSelector,
    ReportLanguage,
    ReportLength,
    ReportRequest,
    ReportStyle,
)
from .report import ReportService
from .storage import CredentialStore

app = typer.Typer(
    name="jira-resume",
    help="Summarize Jira worklogs into a status report",
    no_args_is_help=True,
)
accounts_app = typer.Typer(help="Manage Jira accounts", no_args_is_help=True)
settings_app = typer.Typer(help="Manage OpenRouter settings", no_args_is_help=True)
app.add_typer(accounts_app, name="accounts")
app.add_typer(settings_app, name="settings")

console = Console()


def get_credentials(config: Optional[Config] = None) -> CredentialStore:
    config = config or Config.load()
    return CredentialStore(config.create_store())


def setup_logging(level: str):
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
):
    """
    Jira Resume - summarize Jira worklogs into a status report

    使用方式:
      jira-resume accounts add          # 新增 Jira 帳號
      jira-resume settings set-key      # 設定 OpenRouter API Key
      jira-resume generate              # 生成過去 7 天的報告
    """
    config = Config.load()
    setup_logging("DEBUG" if verbose else config.log_level)


# ============================================================
# Accounts
# ============================================================

@accounts_app.command("list")
def list_accounts():
    """List configured Jira accounts"""
    credentials = get_credentials()
    accounts = credentials.list_accounts()

    if not accounts:
        console.print("[yellow]No accounts added yet.[/yellow]")
        return

    last_selected = credentials.get_last_selected_account_id()

    table = Table(title="Jira Accounts")
    table.add_column("", style="green")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Email")
    table.add_column("Jira URL")

    for account in accounts:
        marker = "*" if account.id == last_selected else ""
        table.add_row(marker, account.id, account.name, account.email, account.jira_url)

    console.print(table)


@accounts_app.command("add")
def add_account(
    name: str = typer.Option(..., "--name", "-n", prompt="Account name", help="Display name"),
    email: str = typer.Option(..., "--email", "-e", prompt="Email", help="Jira account email"),
    token: str = typer.Option(..., "--token", "-t", prompt="API token", hide_input=True, help="Jira API token"),
    jira_url: str = typer.Option(..., "--url", "-u", prompt="Jira URL", help="e.g. https://example.atlassian.net"),
):
    """Add a Jira account"""
    credentials = get_credentials()
    account = Account.create(name=name, email=email, token=token, jira_url=jira_url)
    credentials.add_account(account)
    console.print(f"[green]✓ Account added successfully! ({account.id})[/green]")


@accounts_app.command("delete")
def delete_account(
    account_id: str = typer.Argument(..., help="Account ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Delete a Jira account"""
    credentials = get_credentials()
    try:
        account = credentials.get_account(account_id)
    except ConfigurationError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(1)

    if not yes and not Confirm.ask(f"Are you sure you want to delete {account.name}?", default=False):
        console.print("[dim]Cancelled[/dim]")
        return

    credentials.delete_account(account_id)
    console.print("[green]✓ Account deleted successfully![/green]")


# ============================================================
# Settings
# ============================================================

@settings_app.command("set-key")
def set_api_key(
    api_key: Optional[str] = typer.Argument(None, help="OpenRouter API key"),
):
    """Save the OpenRouter API key"""
    if api_key is None:
        api_key = Prompt.ask("OpenRouter API key", password=True)

    credentials = get_credentials()
    credentials.set_api_key(api_key)
    console.print("[green]✓ API key saved successfully![/green]")


@settings_app.command("show")
def show_settings():
    """Show current settings (without secrets)"""
    config = Config.load()
    credentials = get_credentials(config)

    table = Table(title="Settings", show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("Storage", config.storage_file)
    table.add_row("Model", config.llm_model)
    table.add_row("API URL", config.llm_base_url)
    table.add_row("API key", "[green]configured[/green]" if credentials.has_api_key() else "[red]not set[/red]")
    table.add_row("Accounts", str(len(credentials.list_accounts())))

    console.print(table)


# ============================================================
# Generate
# ============================================================

@app.command()
def generate(
    from_date: Optional[datetime] = typer.Option(None, "--from", formats=["%Y-%m-%d"], help="Start date (default: 7 days ago)"),
    to_date: Optional[datetime] = typer.Option(None, "--to", formats=["%Y-%m-%d"], help="End date (default: today)"),
    account_id: Optional[str] = typer.Option(None, "--account", "-a", help="Account ID (default: last selected)"),
    length: ReportLength = typer.Option(ReportLength.MEDIUM, "--length", "-l", help="Report length"),
    style: ReportStyle = typer.Option(ReportStyle.PROFESSIONAL, "--style", "-s", help="Writing style"),
    language: ReportLanguage = typer.Option(ReportLanguage.ENGLISH, "--language", help="Report language"),
    raw: bool = typer.Option(False, "--raw", "-r", help="Show raw worklogs"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save the report to a file"),
):
    """Generate a status report from Jira worklogs"""
    selector = DateRangeSelector()
    if not selector.update(
        start=from_date.date() if from_date else None,
        end=to_date.date() if to_date else None,
    ):
        console.print("[red]✗ End date cannot be earlier than start date[/red]")
        raise typer.Exit(1)

    config = Config.load()
    service = ReportService.from_config(config)

    try:
        account = service.resolve_account(account_id)
        request = ReportRequest(
            date_range=selector.value,
            account=account,
            length=length,
            style=style,
            language=language,
        )

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(f"Generating report for {account.name} ({selector.value})...", total=None)
            result = service.generate(request)
    except JiraResumeError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(1)

    console.print(Panel(result.resume, title="Resume", border_style="red" if result.failed else "green"))

    if raw:
        if result.entries:
            console.print(render_table(result.entries))
        else:
            console.print(f"[yellow]{NO_WORKLOGS}[/yellow]")

    if output:
        try:
            output.write_text(result.resume, encoding="utf-8")
            console.print(f"[green]✓ Resume saved to {output}[/green]")
        except OSError as e:
            console.print(f"[red]✗ Failed to save resume: {e}[/red]")
            raise typer.Exit(1)


if __name__ == "__main__":
    app()
