"""
Read access to files at the repository root
"""

from pathlib import Path
from typing import Union

from talisman.ignore.constants import MAX_IGNORE_FILE_SIZE
from talisman.utils import get_logger

logger = get_logger(__name__)


class RepoRoot:
    """
    Repository root directory

    ``read_repo_file`` is the file-read capability the ignore loaders expect.
    """

    def __init__(self, root: Union[str, Path], max_file_size: int = MAX_IGNORE_FILE_SIZE):
        self.root = Path(root).resolve()
        self.max_file_size = max_file_size

    def read_repo_file(self, name: str) -> bytes:
        """
        Read a file relative to the repository root

        Args:
            name: File name relative to the root

        Returns:
            Raw file content

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is larger than max_file_size
        """
        file_path = self.root / name
        file_size = file_path.stat().st_size
        if file_size > self.max_file_size:
            raise ValueError(
                f"File too large: {file_size} bytes (max: {self.max_file_size})"
            )
        logger.debug(f"Reading {file_path}")
        return file_path.read_bytes()
