"""Normalization of user-supplied directory and package names."""

import os
import re
from pathlib import Path
from typing import Optional

DEFAULT_TARGET_DIR = "app-project"

TRAILING_SEPARATORS = "/" + os.sep + (os.altsep or "")

# npm package-name grammar: optional @scope/, lowercase, no leading dot/underscore
_PACKAGE_NAME_RE = re.compile(r"(?:@[a-z\d\-*~][a-z\d\-*._~]*/)?[a-z\d\-~][a-z\d\-._~]*")


def format_target_dir(raw: Optional[str]) -> Optional[str]:
    """Trim whitespace and trailing path separators. Returns None for no input."""
    if raw is None:
        return None
    return raw.strip().rstrip(TRAILING_SEPARATORS)


def normalize_target_dir(raw: Optional[str]) -> str:
    """Like ``format_target_dir`` but empty input becomes the default name."""
    return format_target_dir(raw) or DEFAULT_TARGET_DIR


def project_name_for(target_dir: str, cwd: Path) -> str:
    """Name the project after the directory ('.' means cwd)."""
    if target_dir == ".":
        return cwd.resolve().name
    return target_dir


def is_valid_package_name(name: str) -> bool:
    return _PACKAGE_NAME_RE.fullmatch(name) is not None


def to_valid_package_name(raw: str) -> str:
    """Best-effort package.json name suggestion.

    The result is not guaranteed to be valid (blank input stays blank),
    so callers still validate it.
    """
    name = raw.strip().lower()
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"^[._]", "", name)
    name = re.sub(r"[^a-z\d\-~]+", "-", name)
    return name.rstrip("-") or name
