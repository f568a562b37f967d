"""Template catalog for create-boot.

Frameworks group variants for display. Every variant name is unique
across the catalog and is the key used by ``--template``.

Variants with a ``custom_command`` delegate to an external generator;
the rest are copied from a bundled directory ``files/boot-<name>``.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

# Placeholder replaced by the resolved target directory in custom commands
TARGET_DIR = "TARGET_DIR"

# Marker for the alternate-compiler (SWC) flavour of a bundled template
SWC_SUFFIX = "-swc"

BUNDLED_TEMPLATE_ROOT = Path(__file__).parent / "files"


class Color(str, Enum):
    """Display colors (values are rich style names)."""
    BLUE = "blue"
    CYAN = "cyan"
    GREEN = "green"
    LIGHT_GREEN = "bright_green"
    YELLOW = "yellow"
    RESET = "default"


@dataclass(frozen=True)
class Variant:
    name: str
    display: str
    color: Color
    custom_command: Optional[str] = None


@dataclass(frozen=True)
class Framework:
    name: str
    display: str
    color: Color
    variants: Tuple[Variant, ...] = ()

    @property
    def choices(self) -> Tuple[Variant, ...]:
        """Variants to offer; a framework without variants is its own."""
        if self.variants:
            return self.variants
        return (Variant(self.name, self.display, self.color),)


def degit_command(repository: str, target_dir: str = TARGET_DIR) -> str:
    return f"npx degit {repository} {target_dir}"


FRAMEWORKS: Tuple[Framework, ...] = (
    Framework(
        name="vanilla",
        display="Vanilla",
        color=Color.YELLOW,
        variants=(
            Variant("vanilla", "JavaScript", Color.YELLOW),
            Variant("vanilla-ts", "TypeScript", Color.BLUE),
        ),
    ),
    Framework(
        name="vue",
        display="Vue",
        color=Color.GREEN,
        variants=(
            Variant(
                "boot-vue",
                "Vue Bootstrapper(Vue 3, TypeScript, etc.)",
                Color.BLUE,
                degit_command("kirklin/boot-vue"),
            ),
            Variant(
                "boot-nuxt3",
                "Nuxt 3 Bootstrapper(Vue 3, TypeScript, etc.)",
                Color.BLUE,
                degit_command("kirklin/boot-nuxt3"),
            ),
            Variant(
                "custom-create-vue",
                "Custom Vue Setup ↗",
                Color.GREEN,
                f"npm create vue@latest {TARGET_DIR}",
            ),
            Variant(
                "custom-nuxt",
                "Custom Nuxt Setup ↗",
                Color.LIGHT_GREEN,
                f"npm exec nuxi init {TARGET_DIR}",
            ),
        ),
    ),
    Framework(
        name="react",
        display="React",
        color=Color.CYAN,
        variants=(
            Variant("react", "JavaScript", Color.YELLOW),
            Variant("react-ts", "TypeScript", Color.BLUE),
            Variant("react-swc", "JavaScript + SWC", Color.YELLOW),
            Variant("react-swc-ts", "TypeScript + SWC", Color.BLUE),
            Variant(
                "boot-react",
                "React Bootstrapper(TypeScript, etc.)",
                Color.BLUE,
                degit_command("kirklin/boot-react"),
            ),
        ),
    ),
    Framework(
        name="kirklin",
        display="Kirklin Templates",
        color=Color.CYAN,
        variants=(
            Variant(
                "celeris-web",
                "Celeris Web: Highly Performant Vue 3 + Vite + TypeScript template with advanced feature",
                Color.BLUE,
                degit_command("kirklin/celeris-web"),
            ),
            Variant(
                "boot-mini-program",
                "WeChat Mini Program Template (Vue 3, Taro, TypeScript, Uno CSS, etc.)",
                Color.GREEN,
                degit_command("kirklin/boot-mini-program"),
            ),
            Variant(
                "boot-uni",
                "uni-app Starter Template(Vue 3, TypeScript, etc.)",
                Color.GREEN,
                degit_command("kirklin/boot-uni"),
            ),
            Variant(
                "boot-webext",
                "Chrome Extension Starter Template(Vue 3, TypeScript, etc.)",
                Color.YELLOW,
                degit_command("kirklin/boot-webext"),
            ),
            Variant(
                "boot-unplugin",
                "unplugin Starter Template",
                Color.BLUE,
                degit_command("kirklin/boot-unplugin"),
            ),
            Variant(
                "boot-vue-ui-library",
                "Vue UI Library Starter Template",
                Color.BLUE,
                degit_command("kirklin/boot-vue-ui-library"),
            ),
            Variant(
                "boot-slidev",
                "Slides Starter Template",
                Color.BLUE,
                degit_command("kirklin/boot-slidev"),
            ),
        ),
    ),
    Framework(
        name="others",
        display="Other Templates",
        color=Color.RESET,
        variants=(
            Variant(
                "create-vite",
                "Official Vite Template ↗",
                Color.RESET,
                f"npm create vite@latest {TARGET_DIR}",
            ),
        ),
    ),
)


def _build_index(frameworks: Tuple[Framework, ...]) -> Mapping[str, Variant]:
    index = {}
    for framework in frameworks:
        for variant in framework.choices:
            if variant.name in index:
                raise ValueError(f"Duplicate template name: {variant.name}")
            index[variant.name] = variant
    return MappingProxyType(index)


VARIANTS: Mapping[str, Variant] = _build_index(FRAMEWORKS)


def list_template_names() -> frozenset:
    """All names accepted by ``--template``."""
    return frozenset(VARIANTS)


def find_variant(name: str) -> Optional[Variant]:
    """Look up a variant by name, or None if unknown."""
    return VARIANTS.get(name)


def find_framework(name: str) -> Optional[Framework]:
    for framework in FRAMEWORKS:
        if framework.name == name:
            return framework
    return None
