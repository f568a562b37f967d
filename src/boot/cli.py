"""Main CLI entry point for create-boot."""

import logging
import sys

import click
from rich.logging import RichHandler
from rich.markup import escape

from boot import __version__
from boot.commands.create import Selection, create_project
from boot.core.config import BootConfig
from boot.core.errors import BootError, OperationCancelled
from boot.core.names import format_target_dir
from boot.prompts import Arguments, ClickAsker, collect_answers
from boot.ui import Symbols, make_console, print_templates

console = make_console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=make_console(stderr=True), show_path=False)],
        force=True,
    )


@click.command()
@click.version_option(version=__version__, prog_name="create-boot")
@click.argument("target_dir", required=False, type=str)
@click.option(
    "--template",
    "-t",
    type=str,
    default=None,
    help="Template or variant name (see --list-templates)",
)
@click.option(
    "--list-templates",
    is_flag=True,
    help="List available templates",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show debug logging",
)
def main(target_dir, template, list_templates, verbose):
    """Create a new project from a template.

    TARGET_DIR is the project directory (prompted for if omitted).

    \b
    Examples:
      create-boot                         Interactive
      create-boot my-app -t react-ts      Bundled React + TypeScript
      create-boot my-app -t boot-vue      Vue bootstrapper via degit
    """
    _configure_logging(verbose)

    if list_templates:
        print_templates(console)
        return

    config = BootConfig.from_env()
    args = Arguments(target_dir=format_target_dir(target_dir) or None, template=template)

    try:
        answers = collect_answers(args, config, ClickAsker(console))
        selection = Selection.from_answers(answers, args, config)
        exit_code = create_project(
            selection, config, console, overwrite=bool(answers.overwrite)
        )
    except OperationCancelled as e:
        console.print(f"[error]{Symbols.CANCEL}[/] {e}")
        return
    except BootError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(e.exit_code)

    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
