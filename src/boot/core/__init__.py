"""Core modules for create-boot.

- config: run configuration and package manager detection
- names: target directory and package name normalization
- reconcile: target directory state and overwrite handling
- command: template resolution and generator command rewriting
- materialize: copying bundled templates
"""

from boot.core.config import BootConfig, PackageManager

from boot.core.errors import (
    BootError,
    OperationCancelled,
    TemplateNotFoundError,
    MaterializeError,
    PatchTargetMissing,
    CommandNotFoundError,
    TargetDirError,
)

from boot.core.names import (
    DEFAULT_TARGET_DIR,
    normalize_target_dir,
    is_valid_package_name,
    to_valid_package_name,
)

from boot.core.reconcile import DirState, inspect_dir, empty_dir, prepare_target

from boot.core.command import (
    Resolution,
    resolve_template,
    rewrite_command,
    build_argv,
    run_command,
)

from boot.core.materialize import materialize, setup_react_swc, template_dir

__all__ = [
    # Config
    "BootConfig",
    "PackageManager",
    # Errors
    "BootError",
    "OperationCancelled",
    "TemplateNotFoundError",
    "MaterializeError",
    "PatchTargetMissing",
    "CommandNotFoundError",
    "TargetDirError",
    # Names
    "DEFAULT_TARGET_DIR",
    "normalize_target_dir",
    "is_valid_package_name",
    "to_valid_package_name",
    # Reconcile
    "DirState",
    "inspect_dir",
    "empty_dir",
    "prepare_target",
    # Command
    "Resolution",
    "resolve_template",
    "rewrite_command",
    "build_argv",
    "run_command",
    # Materialize
    "materialize",
    "setup_react_swc",
    "template_dir",
]
