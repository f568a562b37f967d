"""Tests for boot.core.materialize module."""

import json
import stat
import sys

import pytest

from boot.core.errors import MaterializeError, PatchTargetMissing, TemplateNotFoundError
from boot.core.materialize import materialize, setup_react_swc, template_dir
from boot.templates import BUNDLED_TEMPLATE_ROOT


def _tree(path):
    """Map relative file path -> bytes for every file under ``path``."""
    return {
        str(p.relative_to(path)): p.read_bytes()
        for p in sorted(path.rglob("*"))
        if p.is_file()
    }


class TestTemplateDir:

    def test_finds_bundled(self):
        assert template_dir("react-ts", BUNDLED_TEMPLATE_ROOT).name == "boot-react-ts"

    def test_missing_raises(self, tmp_path):
        with pytest.raises(TemplateNotFoundError) as exc_info:
            template_dir("nope", tmp_path)
        assert exc_info.value.template == "nope"


class TestMaterialize:
    """Tests for materialize()."""

    def test_renames_gitignore(self, fake_template_root, tmp_path):
        src = fake_template_root / "boot-demo"
        dest = tmp_path / "out"
        dest.mkdir()

        materialize(src, dest, "my-app")

        assert (dest / ".gitignore").read_bytes() == (src / "_gitignore").read_bytes()
        assert not (dest / "_gitignore").exists()

    def test_renames_nested_gitignore(self, fake_template_root, tmp_path):
        dest = tmp_path / "out"
        dest.mkdir()
        materialize(fake_template_root / "boot-demo", dest, "my-app")
        assert (dest / "src" / "nested" / ".gitignore").read_text() == "*.log\n"

    def test_copies_binary_files_byte_for_byte(self, fake_template_root, tmp_path):
        dest = tmp_path / "out"
        dest.mkdir()
        materialize(fake_template_root / "boot-demo", dest, "my-app")
        assert (dest / "src" / "logo.bin").read_bytes() == bytes(range(256))
        assert (dest / "src" / "main.js").read_text() == "console.log('hi')\n"

    def test_package_json_name_rewritten(self, fake_template_root, tmp_path):
        src = fake_template_root / "boot-demo"
        dest = tmp_path / "out"
        dest.mkdir()

        materialize(src, dest, "@me/my-app")

        raw = (dest / "package.json").read_text()
        assert raw != (src / "package.json").read_text()
        assert raw.endswith("}\n")
        assert not raw.endswith("\n\n")
        pkg = json.loads(raw)
        assert pkg["name"] == "@me/my-app"
        assert pkg["scripts"] == {"dev": "vite"}
        # Two-space indentation
        assert '\n  "name": "@me/my-app"' in raw

    def test_key_order_preserved(self, fake_template_root, tmp_path):
        dest = tmp_path / "out"
        dest.mkdir()
        materialize(fake_template_root / "boot-demo", dest, "x")
        pkg = json.loads((dest / "package.json").read_text())
        assert list(pkg) == ["name", "version", "scripts"]

    def test_deterministic(self, fake_template_root, tmp_path):
        first = tmp_path / "one"
        second = tmp_path / "two"
        first.mkdir()
        second.mkdir()

        materialize(fake_template_root / "boot-demo", first, "my-app")
        materialize(fake_template_root / "boot-demo", second, "my-app")

        assert _tree(first) == _tree(second)

    def test_bundled_templates_materialize(self, tmp_path):
        for name in ("vanilla", "vanilla-ts", "react", "react-ts"):
            dest = tmp_path / name
            dest.mkdir()
            materialize(template_dir(name, BUNDLED_TEMPLATE_ROOT), dest, "my-app")
            assert (dest / ".gitignore").exists()
            assert json.loads((dest / "package.json").read_text())["name"] == "my-app"

    def test_unwritable_destination_raises(self, fake_template_root, tmp_path):
        # Destination root is a file, so nothing can be created under it
        dest = tmp_path / "out"
        dest.write_text("not a dir")
        with pytest.raises(MaterializeError):
            materialize(fake_template_root / "boot-demo", dest, "my-app")

    def test_invalid_package_json_raises(self, fake_template_root, tmp_path):
        src = fake_template_root / "boot-demo"
        (src / "package.json").write_text("{ not json")
        dest = tmp_path / "out"
        dest.mkdir()
        with pytest.raises(MaterializeError):
            materialize(src, dest, "my-app")


    @pytest.mark.parametrize("raw", [b"\xff\xfe{}", b"[1, 2]", b"\"text\""])
    def test_unusable_package_json_raises(self, fake_template_root, tmp_path, raw):
        src = fake_template_root / "boot-demo"
        (src / "package.json").write_bytes(raw)
        dest = tmp_path / "out"
        dest.mkdir()
        with pytest.raises(MaterializeError):
            materialize(src, dest, "my-app")

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_keeps_executable_bit(self, fake_template_root, tmp_path):
        script = fake_template_root / "boot-demo" / "src" / "setup.sh"
        script.write_text("#!/bin/sh\necho hi\n")
        script.chmod(0o755)
        dest = tmp_path / "out"
        dest.mkdir()

        materialize(fake_template_root / "boot-demo", dest, "my-app")

        mode = stat.S_IMODE((dest / "src" / "setup.sh").stat().st_mode)
        assert mode & stat.S_IXUSR
        assert mode == stat.S_IMODE(script.stat().st_mode)


class TestSetupReactSwc:
    """Tests for setup_react_swc()."""

    def _project(self, tmp_path, template):
        dest = tmp_path / template
        dest.mkdir()
        materialize(template_dir(template, BUNDLED_TEMPLATE_ROOT), dest, "my-app")
        return dest

    def test_patches_ts_project(self, tmp_path):
        root = self._project(tmp_path, "react-ts")

        setup_react_swc(root, is_ts=True)

        pkg = json.loads((root / "package.json").read_text())
        assert pkg["devDependencies"]["@vitejs/plugin-react-swc"] == "^3.3.2"
        assert "@vitejs/plugin-react" not in pkg["devDependencies"]
        assert "from '@vitejs/plugin-react-swc'" in (root / "vite.config.ts").read_text()

    def test_patches_js_project(self, tmp_path):
        root = self._project(tmp_path, "react")
        setup_react_swc(root, is_ts=False)
        assert "@vitejs/plugin-react-swc" in (root / "vite.config.js").read_text()

    def test_missing_targets_are_silent_by_default(self, tmp_path):
        (tmp_path / "package.json").write_text('{"name": "x"}\n')
        (tmp_path / "vite.config.js").write_text("export default {}\n")

        setup_react_swc(tmp_path, is_ts=False)

        assert (tmp_path / "package.json").read_text() == '{"name": "x"}\n'
        assert (tmp_path / "vite.config.js").read_text() == "export default {}\n"

    def test_missing_config_file_is_silent_by_default(self, tmp_path):
        (tmp_path / "package.json").write_text('{"name": "x"}\n')
        setup_react_swc(tmp_path, is_ts=True)

    def test_strict_mode_raises(self, tmp_path):
        (tmp_path / "package.json").write_text('{"name": "x"}\n')
        with pytest.raises(PatchTargetMissing):
            setup_react_swc(tmp_path, is_ts=False, strict=True)
