import logging
from pathlib import Path

from isucon_restruct.errors import SourceDecodeError

logger = logging.getLogger(__name__)


class LocalFileSystem:
    """``FileSystem`` backed by the real disk. Existing files are overwritten."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise SourceDecodeError(str(path), exc.start, exc.reason) from exc

    def write_text(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")
        logger.info("Wrote %s", path)

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)
