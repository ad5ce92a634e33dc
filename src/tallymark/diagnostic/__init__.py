# tallymark:header:start
#
#   project      : TallyMark
#   file         : __init__.py
#   file_relpath : src/tallymark/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""Diagnostic records and source spans."""

from __future__ import annotations

from tallymark.diagnostic.model import Message, Severity
from tallymark.diagnostic.span import SourceFile, SourceSpan, create_span

__all__ = [
    "Message",
    "Severity",
    "SourceFile",
    "SourceSpan",
    "create_span",
]
