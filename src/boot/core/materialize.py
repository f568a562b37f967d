"""Copy a bundled template into the target directory.

Files are copied byte for byte (keeping their mode) except:

- names in ``RENAME_FILES`` (e.g. ``_gitignore``) get their dotfile name,
  since packaging tools tend to drop or rewrite literal dotfiles
- the top-level ``package.json`` is rewritten with the new package name

SWC variants are patched afterwards with plain substring replacement.
"""

import json
import logging
import re
import shutil
from pathlib import Path
from typing import Callable

from boot.core.errors import MaterializeError, PatchTargetMissing, TemplateNotFoundError

logger = logging.getLogger(__name__)

RENAME_FILES = {
    "_gitignore": ".gitignore",
}

PACKAGE_JSON = "package.json"

REACT_PLUGIN = "@vitejs/plugin-react"
REACT_SWC_PLUGIN = "@vitejs/plugin-react-swc"
REACT_SWC_PLUGIN_VERSION = "^3.3.2"

_REACT_PLUGIN_DEP_RE = re.compile(r'"@vitejs/plugin-react": ".+?"')


def template_dir(template: str, root: Path) -> Path:
    path = root / f"boot-{template}"
    if not path.is_dir():
        raise TemplateNotFoundError(template, path)
    return path


def _target_name(name: str) -> str:
    return RENAME_FILES.get(name, name)


def copy(src: Path, dest: Path) -> None:
    """Copy a file or directory, applying ``RENAME_FILES`` to children."""
    if src.is_dir():
        copy_dir(src, dest)
        return
    try:
        shutil.copy(src, dest)
    except OSError as e:
        raise MaterializeError(
            f"Failed to copy {src} to {dest}: {e}", src=src, dest=dest
        ) from e


def copy_dir(src: Path, dest: Path) -> None:
    try:
        dest.mkdir(parents=True, exist_ok=True)
        entries = list(src.iterdir())
    except OSError as e:
        raise MaterializeError(
            f"Failed to copy {src} to {dest}: {e}", src=src, dest=dest
        ) from e
    for entry in entries:
        copy(entry, dest / _target_name(entry.name))


def write_package_json(src: Path, dest: Path, package_name: str) -> None:
    """Write ``src`` to ``dest`` with its ``name`` replaced."""
    try:
        pkg = json.loads(src.read_text(encoding="utf-8"))
        pkg["name"] = package_name
        dest.write_text(json.dumps(pkg, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as e:
        raise MaterializeError(
            f"Failed to write {dest}: {e}", src=src, dest=dest
        ) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MaterializeError(f"Invalid JSON in {src}: {e}", src=src) from e
    except TypeError as e:
        raise MaterializeError(f"{src} is not a JSON object", src=src) from e


def materialize(template_path: Path, root: Path, package_name: str) -> None:
    """Copy ``template_path`` into ``root`` as a new project.

    Args:
        template_path: Bundled template directory
        root: Target project directory (must already exist)
        package_name: Value for package.json ``name``

    Raises:
        MaterializeError: On any read/write failure. Already written
            files are left in place.
    """
    logger.debug("Copying %s -> %s", template_path, root)
    for entry in template_path.iterdir():
        if entry.name != PACKAGE_JSON:
            copy(entry, root / _target_name(entry.name))

    pkg_src = template_path / PACKAGE_JSON
    if pkg_src.exists():
        write_package_json(pkg_src, root / PACKAGE_JSON, package_name)


def edit_file(path: Path, edit: Callable[[str], str], needle: str, strict: bool = False) -> bool:
    """Apply ``edit`` to the text of ``path``.

    Returns:
        True if the content changed

    Raises:
        PatchTargetMissing: If nothing changed and ``strict`` is set
    """
    if not path.exists():
        if strict:
            raise PatchTargetMissing(path, needle)
        logger.warning("Skipping patch of missing file %s", path)
        return False
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise MaterializeError(f"Failed to read {path}: {e}", src=path) from e
    updated = edit(content)
    if updated == content:
        if strict:
            raise PatchTargetMissing(path, needle)
        logger.warning("'%s' not found in %s, left unchanged", needle, path)
        return False
    try:
        path.write_text(updated, encoding="utf-8")
    except OSError as e:
        raise MaterializeError(f"Failed to write {path}: {e}", dest=path) from e
    return True


def setup_react_swc(root: Path, is_ts: bool, strict: bool = False) -> None:
    """Switch a React project from Babel to SWC."""
    edit_file(
        root / PACKAGE_JSON,
        lambda content: _REACT_PLUGIN_DEP_RE.sub(
            f'"{REACT_SWC_PLUGIN}": "{REACT_SWC_PLUGIN_VERSION}"', content, count=1
        ),
        needle=f'"{REACT_PLUGIN}"',
        strict=strict,
    )
    edit_file(
        root / f"vite.config.{'ts' if is_ts else 'js'}",
        lambda content: content.replace(REACT_PLUGIN, REACT_SWC_PLUGIN, 1),
        needle=REACT_PLUGIN,
        strict=strict,
    )
