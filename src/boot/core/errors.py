"""Exceptions raised while scaffolding a project."""

from pathlib import Path
from typing import Optional


class BootError(Exception):
    """Base exception for create-boot."""

    exit_code = 1


class OperationCancelled(BootError):
    """The user declined to continue or aborted a prompt.

    Not a failure: the CLI prints the message and exits cleanly.
    """

    exit_code = 0

    def __init__(self, message: str = "Operation cancelled"):
        super().__init__(message)


class TemplateNotFoundError(BootError):
    """No bundled template directory exists for a template name."""

    def __init__(self, template: str, path: Path):
        super().__init__(f"Template '{template}' not found at {path}")
        self.template = template
        self.path = path


class MaterializeError(BootError):
    """Copying or writing a template file failed."""

    def __init__(self, message: str, src: Optional[Path] = None, dest: Optional[Path] = None):
        super().__init__(message)
        self.src = src
        self.dest = dest


class PatchTargetMissing(BootError):
    """A text patch found nothing to replace (strict mode only)."""

    def __init__(self, path: Path, needle: str):
        super().__init__(f"Expected '{needle}' in {path} but it was not found")
        self.path = path
        self.needle = needle


class CommandNotFoundError(BootError):
    """The generator program of a delegated command is not on PATH."""

    exit_code = 127

    def __init__(self, program: str):
        super().__init__(f"Command not found: {program}")
        self.program = program


class TargetDirError(BootError):
    """The target directory cannot be used or cleared."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path
