"""Scaffold a project from the collected answers."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console

from boot.core.command import Resolution, build_argv, resolve_template, run_command
from boot.core.config import BootConfig
from boot.core.materialize import materialize, setup_react_swc, template_dir
from boot.core.reconcile import prepare_target
from boot.prompts import Answers, Arguments
from boot.ui.report import print_next_steps


@dataclass(frozen=True)
class Selection:
    """Everything needed to create the project, fixed after prompting."""
    root: Path
    target_dir: str
    project_name: str
    package_name: str
    resolution: Resolution

    @classmethod
    def from_answers(cls, answers: Answers, args: Arguments, config: BootConfig) -> "Selection":
        project_name = answers.project_name(config)
        template = answers.template(args)
        if template is None:
            raise ValueError("No template selected")
        return cls(
            root=answers.root(config),
            target_dir=answers.target_dir,
            project_name=project_name,
            package_name=answers.package_name or project_name,
            resolution=resolve_template(template),
        )


def create_project(
    selection: Selection,
    config: BootConfig,
    console: Console,
    overwrite: bool = False,
) -> Optional[int]:
    """Create the project described by ``selection``.

    Returns:
        The generator's exit code when the template delegates to an
        external command, otherwise None
    """
    prepare_target(selection.root, overwrite=overwrite)

    resolution = selection.resolution
    if resolution.delegates:
        argv = build_argv(
            resolution.custom_command, config.package_manager, selection.target_dir
        )
        return run_command(argv, cwd=config.cwd)

    console.print(f"\nScaffolding project in [cyan]{selection.root}[/]...")
    materialize(
        template_dir(resolution.template, config.template_root),
        selection.root,
        selection.package_name,
    )
    if resolution.use_swc:
        setup_react_swc(
            selection.root,
            is_ts=resolution.template.endswith("-ts"),
            strict=config.strict_patches,
        )

    print_next_steps(console, selection.root, config.cwd, config.package_manager)
    return None
