from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates the output format tokens and CLI defaults to reduce
cross-module coupling.
"""

# Output format. Consumers of the generated file rely on these markers.
BANNER: str = '# Contextify Output'
GENERATED_FROM: str = '# Generated from: '
EXCLUDED_DIRS: str = '# Excluded directories: '
INCLUDED_EXTS: str = '# Included extensions: '
FILE_HEADER: str = '## File: '
FENCE: str = '```'
LIST_JOIN: str = ', '

# Version-control metadata directory that is always pruned.
VCS_DIR: str = '.git'

DEFAULT_INPUT: str = '.'
DEFAULT_OUTPUT: str = 'context.txt'

# Upper bound for a single logical line (bytes, terminator excluded).
DEFAULT_MAX_LINE_BYTES: int = 4 * 1024 * 1024
