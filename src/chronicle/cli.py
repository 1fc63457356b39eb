"""Command-line interface for chronicle."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from chronicle.generator import ChangelogGenerator
from chronicle.log import configure_logging
from chronicle.models import (
    ChangelogSettings,
    OutputFormat,
    RepositoryConfig,
    SortOrder,
    UnclassifiedPolicy,
)

app = typer.Typer(
    name="chronicle",
    help="Generate a changelog from git commit history",
    add_completion=False,
)
console = Console()


def _load_settings(**overrides) -> ChangelogSettings:
    """Load settings from the environment, then apply options given on the command line."""
    settings = ChangelogSettings()
    updates = {key: value for key, value in overrides.items() if value is not None}
    return settings.model_copy(update=updates)


@app.command()
def generate(
    repository: Path = typer.Option(Path("."), "--repository", "-r", help="Path to the git repository"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path for the changelog"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Title for the changelog"),
    output_format: Optional[OutputFormat] = typer.Option(None, "--format", "-f", help="Format for the changelog"),
    sort_order: Optional[SortOrder] = typer.Option(None, "--sort-order", "-s", help="Version order: newest or oldest first"),
    commit_pattern: Optional[str] = typer.Option(None, "--commit-pattern", help="Custom commit message regex with 'type' and 'message' groups"),
    version_pattern: Optional[str] = typer.Option(None, "--version-pattern", help="Custom version tag regex"),
    unclassified: Optional[UnclassifiedPolicy] = typer.Option(None, "--unclassified", help="Drop unclassified commits or group them"),
    branch: str = typer.Option("HEAD", "--branch", "-b", help="Branch to read history from"),
    max_commits: Optional[int] = typer.Option(None, "--max-commits", "-n", help="Maximum commits to read"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Generate a changelog file from a repository's history."""
    try:
        settings = _load_settings(
            output=output,
            title=title,
            output_format=output_format,
            sort_order=sort_order,
            commit_pattern=commit_pattern,
            version_pattern=version_pattern,
            unclassified=unclassified,
        )
        configure_logging("DEBUG" if verbose else settings.log_level)

        # Patterns are validated here, before the repository is touched
        generator = ChangelogGenerator(settings)

        console.print(f"[bold green]Reading history from:[/bold green] {repository}")
        console.print(f"[bold blue]Branch:[/bold blue] {branch}")

        document = generator.generate_from_repository(
            RepositoryConfig(repo_path=repository, branch=branch, max_count=max_commits)
        )
        written = generator.write(document)

        console.print(
            f"\n[bold green]✓[/bold green] {len(document.versions)} version(s), "
            f"{sum(version.commit_count for version in document.versions)} entries"
        )
        console.print(f"[bold green]✓[/bold green] Changelog generated at: {written}")

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def versions(
    repository: Path = typer.Option(Path("."), "--repository", "-r", help="Path to the git repository"),
    version_pattern: Optional[str] = typer.Option(None, "--version-pattern", help="Custom version tag regex"),
    commit_pattern: Optional[str] = typer.Option(None, "--commit-pattern", help="Custom commit message regex"),
    sort_order: Optional[SortOrder] = typer.Option(None, "--sort-order", "-s", help="Version order: newest or oldest first"),
    branch: str = typer.Option("HEAD", "--branch", "-b", help="Branch to read history from"),
    max_commits: Optional[int] = typer.Option(None, "--max-commits", "-n", help="Maximum commits to read"),
) -> None:
    """List the versions detected in a repository without writing a changelog."""
    try:
        settings = _load_settings(
            version_pattern=version_pattern,
            commit_pattern=commit_pattern,
            sort_order=sort_order,
        )
        configure_logging(settings.log_level)
        generator = ChangelogGenerator(settings)

        commits = generator.read_history(
            RepositoryConfig(repo_path=repository, branch=branch, max_count=max_commits)
        )
        document = generator.generate(commits)

        if document.is_empty:
            console.print("[yellow]No commits found[/yellow]")
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Version", style="cyan")
        table.add_column("Date", style="blue")
        table.add_column("Entries", justify="right", style="yellow")
        table.add_column("Groups", style="white")

        for version in document.versions:
            table.add_row(
                version.label,
                version.date.strftime("%Y-%m-%d") if version.date else "-",
                str(version.commit_count),
                ", ".join(group.heading for group in version.groups),
            )

        console.print(table)
        console.print(f"\n[dim]{len(commits)} commits read[/dim]")

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
