import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from solconv.models import SourceRoot

logger = logging.getLogger(__name__)

FOUNDRY_CONFIG_FILE = "foundry.toml"
_FOUNDRY_PROFILE = "default"


class ConfigError(ValueError):
    pass


class FormattingOptions(BaseModel):
    """Options passed to taplo when checking or formatting TOML files."""

    model_config = ConfigDict(frozen=True)

    align_entries: bool = True
    indent_tables: bool = True
    reorder_keys: bool = True
    column_width: int = 100
    indent_string: str = "  "
    allowed_blank_lines: int = 1
    array_auto_expand: bool = True

    def as_taplo_args(self) -> list[str]:
        args: list[str] = []
        for key, value in self.model_dump().items():
            rendered = str(value).lower() if isinstance(value, bool) else str(value)
            args.extend(["--option", f"{key}={rendered}"])
        return args


class LintConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    project_root: Path = Path(".")
    src: str = "src"
    script: str = "script"
    test: str = "test"
    formatting: FormattingOptions = Field(default_factory=FormattingOptions)

    def root_dirs(self) -> list[tuple[SourceRoot, Path]]:
        return [
            (SourceRoot.SRC, self.project_root / self.src),
            (SourceRoot.SCRIPT, self.project_root / self.script),
            (SourceRoot.TEST, self.project_root / self.test),
        ]

    @property
    def foundry_config_path(self) -> Path:
        return self.project_root / FOUNDRY_CONFIG_FILE


def _read_foundry_profile(config_path: Path) -> dict[str, Any]:
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid {config_path}: {exc}") from exc
    profile = data.get("profile", {}).get(_FOUNDRY_PROFILE, {})
    if not isinstance(profile, dict):
        raise ConfigError(f"Invalid {config_path}: [profile.{_FOUNDRY_PROFILE}] must be a table")
    return profile


def load_config(project_root: str | Path = ".") -> LintConfig:
    """Build the lint configuration, picking up directory overrides from foundry.toml."""
    root = Path(project_root)
    overrides: dict[str, Any] = {}
    config_path = root / FOUNDRY_CONFIG_FILE
    if config_path.is_file():
        profile = _read_foundry_profile(config_path)
        overrides = {key: profile[key] for key in ("src", "script", "test") if key in profile}
        logger.debug("Loaded %s (directory overrides: %s)", config_path, overrides)
    else:
        logger.debug("No %s found in %s, using default directories", FOUNDRY_CONFIG_FILE, root)

    try:
        return LintConfig(project_root=root, **overrides)
    except ValidationError as exc:
        raise ConfigError(f"Invalid {config_path}: {exc}") from exc
