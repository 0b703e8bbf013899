import logging
from collections.abc import Sequence
from pathlib import Path

from isucon_restruct.config import RestructureConfig
from isucon_restruct.core.ports.filesystem import FileSystem
from isucon_restruct.models import EntryModule, LibModule, Module

logger = logging.getLogger(__name__)


def module_paths(module: Module, directory: Path, config: RestructureConfig) -> list[Path]:
    """Files ``write_module`` would produce for ``module``, in write order."""
    match module:
        case EntryModule():
            return [directory / config.entry_file_name]
        case LibModule(name=name, children=children):
            paths: list[Path] = []
            for child in children:
                paths.extend(module_paths(child, directory / name, config))
            paths.append(directory / config.file_name(name))
            return paths
    raise TypeError(f"Unknown module type: {type(module).__name__}")


def write_module(fs: FileSystem, module: Module, directory: Path, config: RestructureConfig) -> None:
    match module:
        case EntryModule(content=content):
            fs.write_text(directory / config.entry_file_name, content)
        case LibModule(name=name, content=content, children=children):
            if children:
                fs.make_dirs(directory / name)
                for child in children:
                    write_module(fs, child, directory / name, config)
            fs.write_text(directory / config.file_name(name), content)


def write_modules(fs: FileSystem, modules: Sequence[Module], directory: Path, config: RestructureConfig) -> None:
    """Materialize ``modules`` under ``directory``. Stops at the first filesystem error."""
    for module in modules:
        write_module(fs, module, directory, config)
    logger.debug("Wrote %d modules under %s", len(modules), directory)
