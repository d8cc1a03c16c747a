"""
File helpers: paths anchored to a process-relative root and text writing.
"""

from nmlibs.files.file_tools import (
    FileToolsConfig,
    from_root,
    get_root,
    resolve_path,
    write_file,
)

__all__ = [
    "FileToolsConfig",
    "get_root",
    "resolve_path",
    "from_root",
    "write_file",
]
