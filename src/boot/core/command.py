"""Command resolution for delegating templates.

A template either has a custom generator command or is copied from a
bundled directory. Generator commands are written for npm and rewritten
for the package manager that invoked us, using ``REWRITES`` in order:

1. ``npm create <pkg>``  -> ``<pm> create <pkg>`` (bun: ``bun x create-<pkg>``)
2. ``@latest``           -> dropped for Yarn 1.x, which rejects versions
3. ``npm exec``          -> ``pnpm dlx`` / ``yarn dlx`` / ``bun x``, else ``npm exec``
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from boot.core.config import PackageManager
from boot.core.errors import CommandNotFoundError
from boot.templates import SWC_SUFFIX, TARGET_DIR, find_variant

logger = logging.getLogger(__name__)

# Preferred one-off execution subcommand per manager
EXEC_SUBCOMMANDS = {
    "pnpm": "pnpm dlx",
    "yarn": "yarn dlx",
    "bun": "bun x",
}
FALLBACK_EXEC = "npm exec"


def _create_replacement(pm: PackageManager) -> str:
    # `bun create` has its own template set; run the create-* package directly
    if pm.name == "bun":
        return "bun x create-"
    return f"{pm.name} create "


def _version_pin_replacement(pm: PackageManager) -> str:
    return "" if pm.is_legacy_yarn else "@latest"


def _exec_replacement(pm: PackageManager) -> str:
    if pm.is_legacy_yarn:
        return FALLBACK_EXEC
    return EXEC_SUBCOMMANDS.get(pm.name, FALLBACK_EXEC)


@dataclass(frozen=True)
class Rewrite:
    """Replace ``pattern`` (a prefix when ``leading``) with a per-manager string."""
    pattern: str
    replacement: Callable[[PackageManager], str]
    leading: bool = True

    def apply(self, command: str, pm: PackageManager) -> str:
        if self.leading:
            if not command.startswith(self.pattern):
                return command
            return self.replacement(pm) + command[len(self.pattern):]
        return command.replace(self.pattern, self.replacement(pm), 1)


REWRITES: Tuple[Rewrite, ...] = (
    Rewrite("npm create ", _create_replacement),
    Rewrite("@latest", _version_pin_replacement, leading=False),
    Rewrite("npm exec", _exec_replacement),
)


@dataclass(frozen=True)
class Resolution:
    """What to do with the selected template."""
    template: str
    use_swc: bool = False
    custom_command: Optional[str] = None

    @property
    def delegates(self) -> bool:
        return self.custom_command is not None


def strip_swc(template: str) -> Tuple[str, bool]:
    """Split the alternate-compiler marker off a template name."""
    if SWC_SUFFIX in template:
        return template.replace(SWC_SUFFIX, "", 1), True
    return template, False


def resolve_template(template: str) -> Resolution:
    name, use_swc = strip_swc(template)
    variant = find_variant(name)
    custom_command = variant.custom_command if variant else None
    logger.debug(
        "Resolved template %s -> %s (swc=%s, delegates=%s)",
        template, name, use_swc, custom_command is not None,
    )
    return Resolution(template=name, use_swc=use_swc, custom_command=custom_command)


def rewrite_command(command: str, pm: PackageManager) -> str:
    """Translate an npm-flavoured command into ``pm``'s dialect."""
    for rewrite in REWRITES:
        command = rewrite.apply(command, pm)
    return command


def build_argv(command: str, pm: PackageManager, target_dir: str) -> List[str]:
    """Rewrite ``command`` and split it into argv.

    The target directory is substituted after splitting so that a name
    containing spaces stays a single argument.
    """
    program, *args = rewrite_command(command, pm).split()
    argv = [program] + [arg.replace(TARGET_DIR, target_dir) for arg in args]
    logger.debug("Delegating to: %s", argv)
    return argv


def run_command(argv: List[str], cwd: Path) -> int:
    """Run ``argv`` in the foreground, inheriting stdio.

    Returns:
        The child's exit code, or 0 if it was killed by a signal

    Raises:
        CommandNotFoundError: If the program is not installed
    """
    try:
        result = subprocess.run(argv, cwd=cwd)
    except FileNotFoundError:
        raise CommandNotFoundError(argv[0])
    if result.returncode is None or result.returncode < 0:
        # Killed by a signal: no exit status of its own
        return 0
    return result.returncode
