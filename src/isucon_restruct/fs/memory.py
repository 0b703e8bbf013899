from pathlib import Path


class InMemoryFileSystem:
    """Dict-backed ``FileSystem`` that records every write in order."""

    def __init__(self, files: dict[Path, str] | None = None) -> None:
        self.files: dict[Path, str] = {}
        self.directories: set[Path] = set()
        self.writes: list[Path] = []
        for path, content in (files or {}).items():
            self.make_dirs(path.parent)
            self.files[path] = content

    def exists(self, path: Path) -> bool:
        return path in self.files or path in self.directories

    def read_text(self, path: Path) -> str:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(f"File not found: {path}") from None

    def write_text(self, path: Path, content: str) -> None:
        if path.parent not in self.directories:
            raise FileNotFoundError(f"Directory not found: {path.parent}")
        self.files[path] = content
        self.writes.append(path)

    def make_dirs(self, path: Path) -> None:
        while path != path.parent and path not in self.directories:
            self.directories.add(path)
            path = path.parent
