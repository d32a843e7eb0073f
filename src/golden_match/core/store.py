"""
Golden file storage.

- read / write: exact text (no newline translation)
- temporary: scoped temp file holding the freshly formatted actual value

The parent directory of a golden file is never created: a wrong path is a
caller error and surfaces as FileNotFoundError.
"""

import logging
import os
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from golden_match.domain.constants import DEFAULT_ENCODING, TEMP_FILE_PREFIX

logger = logging.getLogger(__name__)


class GoldenStore:
    """
    Read/write access to one golden file.

    Usage:
        store = GoldenStore("tests/gold/one.txt")
        store.write("1")
        with store.temporary("2") as actual_path:
            ...  # compare actual_path with store.path
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        encoding: str = DEFAULT_ENCODING,
        temp_dir: str | os.PathLike[str] | None = None,
    ):
        self.path = Path(path)
        self.encoding = encoding
        self.temp_dir = temp_dir

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> str:
        with open(self.path, encoding=self.encoding, newline="") as f:
            return f.read()

    def write(self, text: str) -> Path:
        """Overwrite the golden file with `text`."""
        with open(self.path, "w", encoding=self.encoding, newline="") as f:
            f.write(text)
        logger.debug(f"Wrote {len(text)} chars to {self.path}")
        return self.path

    @contextmanager
    def temporary(self, text: str) -> Generator[Path, None, None]:
        """
        Write `text` to a new temp file and yield its path.

        The file is deleted on every exit path, including exceptions.
        """
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding=self.encoding,
            newline="",
            prefix=TEMP_FILE_PREFIX,
            dir=self.temp_dir,
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            try:
                f.write(text)
            except BaseException:
                f.close()
                temp_path.unlink(missing_ok=True)
                raise

        try:
            yield temp_path
        finally:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError as e:
                logger.warning(f"Failed to remove temp file {temp_path}: {e}")
                raise
