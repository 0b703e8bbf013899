import logging
from pathlib import Path

from isucon_restruct.config import RestructureConfig
from isucon_restruct.core.classify import classify_source
from isucon_restruct.core.modules import build_modules
from isucon_restruct.core.ports.filesystem import FileSystem
from isucon_restruct.core.writer import write_modules
from isucon_restruct.models import Module

logger = logging.getLogger(__name__)


def source_dir(root: Path, config: RestructureConfig) -> Path:
    return root / config.source_dir


def entry_file_path(root: Path, config: RestructureConfig) -> Path:
    return source_dir(root, config) / config.entry_file_name


def plan_restructure(fs: FileSystem, root: Path, config: RestructureConfig | None = None) -> list[Module] | None:
    """Parse the project's entry file and build its module tree without writing.

    Returns None when the entry file does not exist.
    """
    config = config or RestructureConfig()
    entry_path = entry_file_path(root, config)
    if not fs.exists(entry_path):
        return None

    logger.info("Restructuring %s", entry_path)
    source = fs.read_text(entry_path)
    fragments = classify_source(source.encode("utf-8"), config)
    return build_modules(fragments)


def run_restructure(fs: FileSystem, root: Path, config: RestructureConfig | None = None) -> list[Module] | None:
    """Split ``<root>/src/main.rs`` into a module tree and write it back under ``<root>/src``.

    Returns the written modules, or None when the entry file does not exist.
    """
    config = config or RestructureConfig()
    modules = plan_restructure(fs, root, config)
    if modules is None:
        return None

    write_modules(fs, modules, source_dir(root, config), config)
    return modules
