# tallymark:header:start
#
#   project      : TallyMark
#   file         : __init__.py
#   file_relpath : src/tallymark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tallymark:header:end

"""TallyMark command-line interface (Click)."""
