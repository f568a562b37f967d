"""Run configuration for create-boot.

All environment and working-directory lookups happen once, in
``BootConfig.from_env``. Core functions receive the resulting config
instead of reading process globals themselves.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from boot.templates import BUNDLED_TEMPLATE_ROOT

USER_AGENT_ENV = "npm_config_user_agent"
TEMPLATE_ROOT_ENV = "CREATE_BOOT_TEMPLATE_ROOT"
STRICT_PATCHES_ENV = "CREATE_BOOT_STRICT_PATCHES"

DEFAULT_PACKAGE_MANAGER = "npm"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class PackageManager:
    """The package manager that invoked us, parsed from its user agent."""
    name: str = DEFAULT_PACKAGE_MANAGER
    version: str = ""

    @property
    def is_legacy_yarn(self) -> bool:
        return self.name == "yarn" and self.version.startswith("1.")

    @classmethod
    def from_user_agent(cls, user_agent: Optional[str]) -> "PackageManager":
        """Parse ``name/version ...`` (e.g. ``pnpm/8.6.0 npm/? node/v18``).

        Missing or empty input falls back to npm.
        """
        if not user_agent or not user_agent.strip():
            return cls()
        spec = user_agent.split()[0]
        name, _, version = spec.partition("/")
        if not name:
            return cls()
        return cls(name=name, version=version)


@dataclass(frozen=True)
class BootConfig:
    """Configuration for a single create-boot run."""
    cwd: Path
    user_agent: Optional[str] = None
    template_root: Path = BUNDLED_TEMPLATE_ROOT
    strict_patches: bool = False  # Fail when an alternate-compiler patch finds nothing
    package_manager: PackageManager = field(init=False)

    def __post_init__(self):
        object.__setattr__(
            self, "package_manager", PackageManager.from_user_agent(self.user_agent)
        )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        cwd: Optional[Path] = None,
    ) -> "BootConfig":
        env = os.environ if environ is None else environ
        root = env.get(TEMPLATE_ROOT_ENV)
        return cls(
            cwd=cwd or Path.cwd(),
            user_agent=env.get(USER_AGENT_ENV),
            template_root=Path(root) if root else BUNDLED_TEMPLATE_ROOT,
            strict_patches=env.get(STRICT_PATCHES_ENV, "").strip().lower() in _TRUTHY,
        )
