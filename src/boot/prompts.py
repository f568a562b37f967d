"""Interactive questions for create-boot.

The flow is an ordered tuple of steps. Each step looks at the answers
collected so far and either returns a ``Question`` or ``None`` to skip.
Answers are stored on ``Answers`` under the question's name.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Sequence, Tuple, Union

import click
from rich.console import Console
from rich.markup import escape

from boot.core.config import BootConfig
from boot.core.errors import OperationCancelled
from boot.core.names import (
    DEFAULT_TARGET_DIR,
    is_valid_package_name,
    normalize_target_dir,
    project_name_for,
    to_valid_package_name,
)
from boot.core.reconcile import DirState, inspect_dir
from boot.templates import FRAMEWORKS, Framework, list_template_names

Validator = Callable[[Any], Union[bool, str]]


@dataclass(frozen=True)
class Arguments:
    """Values given on the command line."""
    target_dir: Optional[str] = None
    template: Optional[str] = None

    @property
    def has_valid_template(self) -> bool:
        return self.template is not None and self.template in list_template_names()


@dataclass(frozen=True)
class Question:
    name: str
    kind: str  # text, confirm, select
    message: str
    default: Any = None
    choices: Sequence[Tuple[str, Any]] = ()  # (label, value)
    validate: Optional[Validator] = None
    transform: Optional[Callable[[Any], Any]] = None


@dataclass
class Answers:
    target_dir: str
    overwrite: Optional[bool] = None
    package_name: Optional[str] = None
    framework: Optional[Framework] = None
    variant: Optional[str] = None

    def root(self, config: BootConfig) -> Path:
        return (config.cwd / self.target_dir).resolve()

    def project_name(self, config: BootConfig) -> str:
        return project_name_for(self.target_dir, config.cwd)

    def template(self, args: Arguments) -> Optional[str]:
        if self.variant:
            return self.variant
        if self.framework:
            return self.framework.name
        return args.template


Step = Callable[[Answers, Arguments, BootConfig], Optional[Question]]


# =============================================================================
# Steps
# =============================================================================

def ask_project_name(answers: Answers, args: Arguments, config: BootConfig) -> Optional[Question]:
    if args.target_dir:
        return None
    return Question(
        name="target_dir",
        kind="text",
        message="Project name",
        default=DEFAULT_TARGET_DIR,
        transform=normalize_target_dir,
    )


def confirm_overwrite(answers: Answers, args: Arguments, config: BootConfig) -> Optional[Question]:
    if inspect_dir(answers.root(config)) is not DirState.NON_EMPTY:
        return None
    where = (
        "Current directory"
        if answers.target_dir == "."
        else f'Target directory "{answers.target_dir}"'
    )
    return Question(
        name="overwrite",
        kind="confirm",
        message=f"{where} is not empty. Remove existing files and continue?",
        default=False,
    )


def check_overwrite(answers: Answers, args: Arguments, config: BootConfig) -> Optional[Question]:
    if answers.overwrite is False:
        raise OperationCancelled()
    return None


def ask_package_name(answers: Answers, args: Arguments, config: BootConfig) -> Optional[Question]:
    project_name = answers.project_name(config)
    if is_valid_package_name(project_name):
        return None
    return Question(
        name="package_name",
        kind="text",
        message="Package name",
        default=to_valid_package_name(project_name),
        validate=lambda value: is_valid_package_name(value) or "Invalid package.json name",
    )


def ask_framework(answers: Answers, args: Arguments, config: BootConfig) -> Optional[Question]:
    if args.has_valid_template:
        return None
    if args.template is not None:
        message = f'"{args.template}" isn\'t a valid template. Please choose from below'
    else:
        message = "Select a framework"
    return Question(
        name="framework",
        kind="select",
        message=message,
        default=1,
        choices=[
            (f"[{f.color.value}]{f.display or f.name}[/]", f) for f in FRAMEWORKS
        ],
    )


def ask_variant(answers: Answers, args: Arguments, config: BootConfig) -> Optional[Question]:
    framework = answers.framework
    if framework is None or not framework.variants:
        return None
    return Question(
        name="variant",
        kind="select",
        message="Select a variant",
        default=1,
        choices=[
            (f"[{v.color.value}]{v.display or v.name}[/]", v.name)
            for v in framework.variants
        ],
    )


STEPS: Tuple[Step, ...] = (
    ask_project_name,
    confirm_overwrite,
    check_overwrite,
    ask_package_name,
    ask_framework,
    ask_variant,
)


# =============================================================================
# Asking
# =============================================================================

class ClickAsker:
    """Ask questions on the terminal with click prompts.

    Ctrl-C or EOF at any prompt raises ``OperationCancelled``.
    """

    def __init__(self, console: Console):
        self.console = console

    def ask(self, question: Question) -> Any:
        try:
            if question.kind == "confirm":
                return click.confirm(question.message, default=question.default)
            if question.kind == "select":
                return self._select(question)
            return self._text(question)
        except click.Abort:
            raise OperationCancelled()

    def _text(self, question: Question) -> str:
        while True:
            value = click.prompt(question.message, default=question.default)
            if question.validate is None:
                return value
            verdict = question.validate(value)
            if verdict is True:
                return value
            self.console.print(f"[error]{verdict}[/]")

    def _select(self, question: Question) -> Any:
        self.console.print(f"[prompt]{escape(question.message)}:[/]")
        for index, (label, _) in enumerate(question.choices, start=1):
            self.console.print(f"  [text.dim]{index})[/] {label}")
        index = click.prompt(
            "Choice",
            type=click.IntRange(1, len(question.choices)),
            default=question.default,
        )
        return question.choices[index - 1][1]


def collect_answers(
    args: Arguments,
    config: BootConfig,
    asker,
    steps: Sequence[Step] = STEPS,
) -> Answers:
    """Run ``steps`` in order and return the answers.

    Raises:
        OperationCancelled: If the user aborts or declines to overwrite
    """
    answers = Answers(target_dir=normalize_target_dir(args.target_dir))
    for step in steps:
        question = step(answers, args, config)
        if question is None:
            continue
        value = asker.ask(question)
        if question.transform is not None:
            value = question.transform(value)
        setattr(answers, question.name, value)
    return answers
