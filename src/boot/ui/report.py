"""Output for the end of a run and for ``--list-templates``."""

import os
from pathlib import Path
from typing import List

from rich.console import Console
from rich.table import Table

from boot.core.config import PackageManager
from boot.templates import FRAMEWORKS
from boot.ui.theme import Symbols


def next_steps(root: Path, cwd: Path, pm: PackageManager) -> List[str]:
    """Commands the user should run next, one per line."""
    lines = []
    if root != cwd:
        cd_target = os.path.relpath(root, cwd)
        if any(ch.isspace() for ch in cd_target):
            cd_target = f'"{cd_target}"'
        lines.append(f"cd {cd_target}")

    if pm.name == "yarn":
        lines.append("yarn")
        lines.append("yarn dev")
    else:
        lines.append(f"{pm.name} install")
        lines.append(f"{pm.name} run dev")
    return lines


def print_next_steps(console: Console, root: Path, cwd: Path, pm: PackageManager) -> None:
    console.print(f"\n[success]{Symbols.SUCCESS} Done.[/] Now run:\n")
    for line in next_steps(root, cwd, pm):
        console.print(f"  {line}", style="command", markup=False, highlight=False)
    console.print()


def print_templates(console: Console) -> None:
    """Show the template catalog."""
    table = Table(title="Available Templates")
    table.add_column("Framework", style="bold")
    table.add_column("Template", style="cyan")
    table.add_column("Description")
    table.add_column("Source", style="text.dim")

    for framework in FRAMEWORKS:
        for variant in framework.choices:
            table.add_row(
                f"[{framework.color.value}]{framework.display}[/]",
                variant.name,
                variant.display,
                variant.custom_command or "bundled",
            )

    console.print(table)
    console.print("\n[bold]Usage:[/]")
    console.print("  create-boot my-app --template react-ts")
    console.print("  create-boot my-app -t boot-vue")
