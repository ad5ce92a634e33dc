# tallymark:header:start
#
#   project      : TallyMark
#   file         : constants.py
#   file_relpath : src/tallymark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""TallyMark Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    TALLYMARK_VERSION: str = get_version("tallymark")
except PackageNotFoundError:  # running from a source checkout
    TALLYMARK_VERSION = "0.0.0"

# Package context used for units that do not belong to a distribution package.
OTHER_PACKAGE: str = "*other*"

# Identifier schemes of platform-provided units and of package units.
DEFAULT_SYSTEM_SCHEMES: tuple[str, ...] = ("dart",)
DEFAULT_PACKAGE_SCHEME: str = "package"

# Diagnostic kind that always gets its own column in the report.
ANALYZER_ERROR_KIND: str = "AnalyzerError"

# Config file names (discovered in the working directory).
TALLYMARK_TOML_NAME: str = "tallymark.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Environment variable honored by `tallymark.config.logging`.
LOG_LEVEL_ENV_VAR: str = "TALLYMARK_LOG_LEVEL"
