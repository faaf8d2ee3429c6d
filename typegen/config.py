"""Run configuration for a batch generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath

from .errors import ConfigError
from .languages import TargetLanguage, get_target_language


@dataclass(frozen=True)
class RendererOptions:
    """Renderer settings applied to every schema in a run.

    The defaults produce type-only declarations without accessor methods,
    preferring named types over inline unions and literal constant types.
    """

    just_types: bool = True
    prefer_types: bool = True
    prefer_unions: bool = False
    prefer_const_values: bool = True
    generate_additional_property_access: bool = False

    def as_dict(self) -> dict[str, bool]:
        """Return the options keyed by their engine spelling."""
        return {
            "just-types": self.just_types,
            "prefer-types": self.prefer_types,
            "prefer-unions": self.prefer_unions,
            "prefer-const-values": self.prefer_const_values,
            "generate-additional-property-access": self.generate_additional_property_access,
        }


def _check_dir_name(label: str, value: str) -> None:
    parts = PurePath(value).parts
    if not value or PurePath(value).is_absolute() or ".." in parts or not parts:
        raise ConfigError(f"{label} must be a relative directory name, got {value!r}")


@dataclass(frozen=True)
class GeneratorConfig:
    """Everything one run needs; validated on construction."""

    root: Path
    output_dir: str = "result"
    language: str = "ts"
    schema_dir: str = "schemas"
    exclude_marker: str = "ignore"
    quicktype: str = "quicktype"
    banner: bool = False
    renderer: RendererOptions = field(default_factory=RendererOptions)

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root).absolute())
        get_target_language(self.language)
        _check_dir_name("output_dir", self.output_dir)
        _check_dir_name("schema_dir", self.schema_dir)
        if not self.exclude_marker:
            raise ConfigError("exclude_marker must not be empty")

    @property
    def target(self) -> TargetLanguage:
        return get_target_language(self.language)

    @property
    def schema_path(self) -> Path:
        return self.root / self.schema_dir

    @property
    def output_path(self) -> Path:
        return self.root / self.output_dir
