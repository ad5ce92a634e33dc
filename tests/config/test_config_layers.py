# tallymark:header:start
#
#   project      : TallyMark
#   file         : test_config_layers.py
#   file_relpath : tests/config/test_config_layers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Tests for config loading, layering and freezing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tallymark.config.model import Config, MutableConfig, OrphanPolicy
from tallymark.diagnostic.model import Severity

if TYPE_CHECKING:
    from pathlib import Path

TALLYMARK_TOML: str = """
[reporter]
min_level = "warning"
on_orphan_message = "drop"
system_schemes = ["dart", "builtin"]
package_scheme = "pkg"

[log]
use_colors = true
"""

PYPROJECT_TOML: str = """
[project]
name = "demo"

[tool.tallymark.reporter]
min_level = "info"
on_orphan_message = "error"
"""


def test_defaults() -> None:
    config: Config = MutableConfig.from_defaults().freeze()
    assert config == Config()
    assert config.min_level is Severity.ALL
    assert config.on_orphan_message is OrphanPolicy.ERROR
    assert config.system_schemes == ("dart",)
    assert config.package_scheme == "package"
    assert config.use_colors is False


def test_from_tallymark_toml(tmp_path: Path) -> None:
    path: Path = tmp_path / "tallymark.toml"
    path.write_text(TALLYMARK_TOML, encoding="utf-8")

    draft: MutableConfig | None = MutableConfig.from_toml_file(path)
    assert draft is not None
    config: Config = draft.freeze()

    assert config.min_level is Severity.WARNING
    assert config.on_orphan_message is OrphanPolicy.DROP
    assert config.system_schemes == ("dart", "builtin")
    assert config.package_scheme == "pkg"
    assert config.use_colors is True
    assert config.config_files == (str(path),)


def test_pyproject_without_section_is_skipped(tmp_path: Path) -> None:
    path: Path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert MutableConfig.from_toml_file(path) is None


def test_tallymark_toml_wins_over_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(PYPROJECT_TOML, encoding="utf-8")
    (tmp_path / "tallymark.toml").write_text(TALLYMARK_TOML, encoding="utf-8")

    config: Config = MutableConfig.load_merged(search_dir=tmp_path).freeze()

    assert config.min_level is Severity.WARNING
    assert config.on_orphan_message is OrphanPolicy.DROP
    assert config.config_files == (
        str(tmp_path / "pyproject.toml"),
        str(tmp_path / "tallymark.toml"),
    )


def test_extra_files_and_overrides_win(tmp_path: Path) -> None:
    (tmp_path / "tallymark.toml").write_text(TALLYMARK_TOML, encoding="utf-8")
    extra: Path = tmp_path / "extra.toml"
    extra.write_text('[reporter]\nmin_level = "severe"\n', encoding="utf-8")

    config: Config = MutableConfig.load_merged(
        search_dir=tmp_path,
        extra_config_files=[extra],
        overrides={"on_orphan_message": OrphanPolicy.ERROR, "min_level": None},
    ).freeze()

    assert config.min_level is Severity.SEVERE
    assert config.on_orphan_message is OrphanPolicy.ERROR
    assert config.package_scheme == "pkg"


def test_invalid_values_keep_previous_layer(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path: Path = tmp_path / "tallymark.toml"
    path.write_text(
        '[reporter]\nmin_level = "loud"\non_orphan_message = 3\nsystem_schemes = "dart"\n'
        "[log]\nuse_colors = \"yes\"\n",
        encoding="utf-8",
    )

    with caplog.at_level("WARNING"):
        config: Config = MutableConfig.load_merged(extra_config_files=[path]).freeze()

    assert config == Config(config_files=(str(path),))
    assert "loud" in caplog.text


def test_unparsable_toml_is_empty(tmp_path: Path) -> None:
    path: Path = tmp_path / "tallymark.toml"
    path.write_text("[reporter\nmin_level = ", encoding="utf-8")

    draft: MutableConfig | None = MutableConfig.from_toml_file(path)

    assert draft is not None
    assert draft.freeze() == Config(config_files=(str(path),))


def test_thaw_and_merge_round_trip() -> None:
    base: Config = Config(min_level=Severity.INFO)
    draft: MutableConfig = base.thaw()
    draft.package_scheme = "pkg"

    merged: Config = draft.merge_with(MutableConfig(use_colors=True)).freeze()

    assert merged.min_level is Severity.INFO
    assert merged.package_scheme == "pkg"
    assert merged.use_colors is True
    assert base.package_scheme == "package"


def test_to_toml_dict() -> None:
    data = Config(min_level=Severity.WARNING, on_orphan_message=OrphanPolicy.DROP).to_toml_dict()
    assert data["reporter"] == {
        "min_level": "warning",
        "on_orphan_message": "drop",
        "system_schemes": ["dart"],
        "package_scheme": "package",
    }
    assert data["log"] == {"use_colors": False}


def test_orphan_policy_from_name() -> None:
    assert OrphanPolicy.from_name("DROP") is OrphanPolicy.DROP
    assert OrphanPolicy.from_name("ignore") is None
    assert OrphanPolicy.from_name(None) is None
