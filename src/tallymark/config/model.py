# tallymark:header:start
#
#   project      : TallyMark
#   file         : model.py
#   file_relpath : src/tallymark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Configuration model for TallyMark reporters.

Two classes split the configuration lifecycle:

- `MutableConfig`: a builder used while layering defaults, config files and
  CLI overrides (later layers win for every value they set).
- `Config`: the immutable runtime snapshot consumed by reporters.

Invalid values in a layer are logged and ignored, so the previous layer's
value survives.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from tallymark.config.io import (
    discover_config_files,
    extract_tool_table,
    get_bool_value_or_none,
    get_string_list_or_none,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
)
from tallymark.config.keys import Toml
from tallymark.config.logging import TallymarkLogger, get_logger
from tallymark.constants import DEFAULT_PACKAGE_SCHEME, DEFAULT_SYSTEM_SCHEMES
from tallymark.diagnostic.model import Severity

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from tallymark.config.io import TomlTable

logger: TallymarkLogger = get_logger(__name__)


class OrphanPolicy(str, Enum):
    """What to do with a message logged while no unit is current."""

    ERROR = "error"
    DROP = "drop"

    @classmethod
    def from_name(cls, name: str | None) -> OrphanPolicy | None:
        """Return the policy named ``name`` (case-insensitive), or None."""
        if name is None:
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for TallyMark.

    Attributes:
        min_level (Severity): Messages below this level are not summarized.
        on_orphan_message (OrphanPolicy): Fail fast or drop messages logged with no
            current unit.
        system_schemes (tuple[str, ...]): Identifier schemes of platform units.
        package_scheme (str): Identifier scheme of package units.
        use_colors (bool): Whether the log-forwarding reporter colors its highlights.
        config_files (tuple[str, ...]): Config sources that contributed to this snapshot.
    """

    min_level: Severity = Severity.ALL
    on_orphan_message: OrphanPolicy = OrphanPolicy.ERROR
    system_schemes: tuple[str, ...] = DEFAULT_SYSTEM_SCHEMES
    package_scheme: str = DEFAULT_PACKAGE_SCHEME
    use_colors: bool = False
    config_files: tuple[str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            min_level=self.min_level,
            on_orphan_message=self.on_orphan_message,
            system_schemes=list(self.system_schemes),
            package_scheme=self.package_scheme,
            use_colors=self.use_colors,
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict."""
        return {
            Toml.SECTION_REPORTER: {
                Toml.KEY_MIN_LEVEL: self.min_level.label,
                Toml.KEY_ON_ORPHAN_MESSAGE: self.on_orphan_message.value,
                Toml.KEY_SYSTEM_SCHEMES: list(self.system_schemes),
                Toml.KEY_PACKAGE_SCHEME: self.package_scheme,
            },
            Toml.SECTION_LOG: {
                Toml.KEY_USE_COLORS: self.use_colors,
            },
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Fields set to None are "not set by this layer" and are skipped by
    `merge_with`.
    """

    min_level: Severity | None = None
    on_orphan_message: OrphanPolicy | None = None
    system_schemes: list[str] | None = None
    package_scheme: str | None = None
    use_colors: bool | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, filling unset values with defaults."""
        defaults = Config()
        return Config(
            min_level=self.min_level if self.min_level is not None else defaults.min_level,
            on_orphan_message=(
                self.on_orphan_message
                if self.on_orphan_message is not None
                else defaults.on_orphan_message
            ),
            system_schemes=(
                tuple(self.system_schemes)
                if self.system_schemes is not None
                else defaults.system_schemes
            ),
            package_scheme=self.package_scheme or defaults.package_scheme,
            use_colors=self.use_colors if self.use_colors is not None else defaults.use_colors,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        return Config().thaw()

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TallyMark TOML table.

        Args:
            data (TomlTable): The TallyMark table (``[tool.tallymark]`` content for
                ``pyproject.toml``).
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableConfig: The resulting draft; values absent from ``data`` stay unset.
        """
        reporter_tbl: TomlTable = get_table_value(data, Toml.SECTION_REPORTER)
        logger.trace("TOML [reporter]: %s", reporter_tbl)
        log_tbl: TomlTable = get_table_value(data, Toml.SECTION_LOG)
        logger.trace("TOML [log]: %s", log_tbl)

        draft = cls(config_files=[str(config_file)] if config_file else [])

        level_name: str | None = get_string_value_or_none(reporter_tbl, Toml.KEY_MIN_LEVEL)
        draft.min_level = Severity.from_name(level_name)
        if level_name is not None and draft.min_level is None:
            logger.warning("Ignoring unknown %s %r", Toml.KEY_MIN_LEVEL, level_name)

        orphan_name: str | None = get_string_value_or_none(
            reporter_tbl, Toml.KEY_ON_ORPHAN_MESSAGE
        )
        draft.on_orphan_message = OrphanPolicy.from_name(orphan_name)
        if orphan_name is not None and draft.on_orphan_message is None:
            logger.warning("Ignoring unknown %s %r", Toml.KEY_ON_ORPHAN_MESSAGE, orphan_name)

        draft.system_schemes = get_string_list_or_none(reporter_tbl, Toml.KEY_SYSTEM_SCHEMES)
        draft.package_scheme = get_string_value_or_none(reporter_tbl, Toml.KEY_PACKAGE_SCHEME)
        draft.use_colors = get_bool_value_or_none(log_tbl, Toml.KEY_USE_COLORS)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``tallymark.toml`` and ``pyproject.toml`` files, extracting
        the ``[tool.tallymark]`` section from the latter.

        Returns:
            MutableConfig | None: The draft, or None if ``pyproject.toml`` has no
                ``[tool.tallymark]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_tool_table(path, load_toml_dict(path))
        if table is None:
            logger.debug("[tool.tallymark] section missing in %s", path)
            return None
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        search_dir: Path | None = None,
        extra_config_files: list[Path] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> MutableConfig:
        """Build a config from defaults, discovered files, extra files and overrides.

        Args:
            search_dir (Path | None): Directory to discover ``pyproject.toml`` and
                ``tallymark.toml`` in; no discovery when None.
            extra_config_files (list[Path] | None): Explicit config files, applied
                after discovered ones.
            overrides (Mapping[str, Any] | None): Final overrides, keyed by
                `MutableConfig` field names; None values are skipped.

        Returns:
            MutableConfig: The merged draft.
        """
        merged: MutableConfig = cls.from_defaults()
        paths: list[Path] = discover_config_files(search_dir) if search_dir is not None else []
        paths.extend(extra_config_files or [])
        for path in paths:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged = merged.merge_with(layer)
        if overrides:
            merged = merged.merge_with(cls(**{k: v for k, v in overrides.items() if v is not None}))
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder with ``other``'s set values layered over this one."""
        return MutableConfig(
            min_level=other.min_level if other.min_level is not None else self.min_level,
            on_orphan_message=(
                other.on_orphan_message
                if other.on_orphan_message is not None
                else self.on_orphan_message
            ),
            system_schemes=(
                list(other.system_schemes)
                if other.system_schemes is not None
                else self.system_schemes
            ),
            package_scheme=other.package_scheme or self.package_scheme,
            use_colors=other.use_colors if other.use_colors is not None else self.use_colors,
            config_files=[*self.config_files, *other.config_files],
        )
