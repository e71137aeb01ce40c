"""
Local source retrieval for Class Insight.

:class:`DirectoryLoader` plays both upstream roles the core expects: it
lists the file paths under a directory and loads the text of one path.
Paths are relative and POSIX-style, so results do not depend on where the
project is checked out.
"""

from fnmatch import fnmatch
from pathlib import Path
from typing import List, Optional, Union

from .config import DEFAULT_CONFIG, AnalysisConfig
from .exceptions import FileAccessError, InvalidPathError
from .logging_config import get_logger

logger = get_logger(__name__)


class DirectoryLoader:
    """List and read source files below a root directory."""

    def __init__(self, root: Union[str, Path], config: Optional[AnalysisConfig] = None):
        self.root = Path(root)
        self.config = config or DEFAULT_CONFIG

        if not self.root.exists():
            raise InvalidPathError(self.root, "path does not exist")
        if not self.root.is_dir():
            raise InvalidPathError(self.root, "not a directory")

    def is_excluded(self, relative: str) -> bool:
        """True if *relative* matches an exclude pattern at the root or below it."""
        for pattern in self.config.exclude_patterns:
            if fnmatch(relative, pattern) or fnmatch(relative, f"*/{pattern}"):
                return True
        return False

    def list_files(self) -> List[str]:
        """All files below the root as sorted relative POSIX paths.

        Every file is listed, whatever its extension; filtering by
        extension happens during analysis so the raw listing stays
        available to a tree view.
        """
        paths = []
        for path in self.root.rglob("*"):
            if not path.is_file():
                continue
            relative = path.relative_to(self.root).as_posix()
            if self.is_excluded(relative):
                continue
            paths.append(relative)
        paths.sort()
        logger.debug(f"Listed {len(paths)} files under {self.root}")
        return paths

    def __call__(self, relative: str) -> str:
        """Read one file as UTF-8, replacing undecodable bytes.

        Raises:
            FileAccessError: If the file is too large or cannot be read
        """
        path = self.root / relative
        try:
            size = path.stat().st_size
        except OSError as e:
            raise FileAccessError(path, f"OS error: {e}")

        if size > self.config.max_file_size_bytes:
            raise FileAccessError(
                path, f"File too large: {size} bytes (max {self.config.max_file_size_bytes})"
            )

        try:
            with open(path, encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            raise FileAccessError(path, f"OS error: {e}")
