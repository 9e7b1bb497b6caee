# src/interface/cli.py

from typing import List
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.prompt import Prompt
from rich import box
from rich.text import Text

from src.domain.models import ChecksumResult, HostProfile


console = Console()


def display_welcome_banner() -> None:
    console.print(Panel.fit(
        "[bold cyan]🔐 SHA-256 Config Check[/bold cyan]\n"
        "[dim]Newest-file checksums for managed hosts[/dim]",
        box=box.DOUBLE,
        border_style="cyan",
    ))


def display_profiles(profiles: List[HostProfile]) -> None:
    table = Table(title="Host profiles", box=box.SIMPLE_HEAVY)
    table.add_column("Profile", style="bold")
    table.add_column("Home")
    table.add_column("Files")
    table.add_column("Containers", style="dim")

    for profile in profiles:
        files = ", ".join(
            f"{name} → {profile.file_directories.get(name, '?')}"
            for name in sorted(profile.allowed_files)
        )
        containers = (
            f"{profile.container_directory}/<id>" if profile.container_directory else "-"
        )
        table.add_row(profile.name, profile.home_directory, files, containers)

    console.print(table)


def prompt_for_profile(profiles: List[HostProfile]) -> str:
    return Prompt.ask(
        "\n[bold yellow]🖥  Profile[/bold yellow]",
        choices=[p.name for p in profiles],
    )


def prompt_for_target(profile: HostProfile) -> str:
    hint = "file name"
    if profile.container_directory:
        hint += f" or {profile.container_directory}:<id>"
    return Prompt.ask(f"[bold yellow]📄 Target[/bold yellow] [dim]({hint})[/dim]", default="")


def display_checksum(profile: HostProfile, target: str, result: ChecksumResult) -> None:
    content = Text()
    content.append("📄 File: ", style="dim")
    content.append(str(result.file_path), style="bold white")
    content.append("\n🔑 sha256: ")
    content.append(result.sha256sum, style="green")

    console.print(Panel(
        content,
        title=f"[bold]{profile.name} / {target}[/bold]",
        border_style="green",
        box=box.ROUNDED,
        padding=(1, 2),
    ))


def display_error(message: str) -> None:
    console.print(f"\n[bold red]✗ Error:[/bold red] {message}\n")


def ask_continue() -> bool:
    answer = Prompt.ask(
        "\n[dim]Check another?[/dim]",
        choices=["y", "n"],
        default="y",
    )
    return answer.lower() == "y"
