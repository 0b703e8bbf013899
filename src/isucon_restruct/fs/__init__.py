from isucon_restruct.fs.local import LocalFileSystem
from isucon_restruct.fs.memory import InMemoryFileSystem

__all__ = [
    "InMemoryFileSystem",
    "LocalFileSystem",
]
