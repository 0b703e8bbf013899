"""Unit tests for writing the module tree through the filesystem port."""

from pathlib import Path

import pytest

from isucon_restruct.config import RestructureConfig
from isucon_restruct.core.writer import module_paths, write_module, write_modules
from isucon_restruct.fs import InMemoryFileSystem
from isucon_restruct.models import EntryModule, LibModule

ROOT = Path("/project/src")


@pytest.fixture
def fs() -> InMemoryFileSystem:
    return InMemoryFileSystem({ROOT / "main.rs": "fn main() {}"})


def test_entry_module_overwrites_main(fs: InMemoryFileSystem, config: RestructureConfig) -> None:
    write_module(fs, EntryModule(content="mod a;\nfn main() {}"), ROOT, config)
    assert fs.files[ROOT / "main.rs"] == "mod a;\nfn main() {}"


def test_lib_without_children_writes_only_a_file(fs: InMemoryFileSystem, config: RestructureConfig) -> None:
    write_module(fs, LibModule(name="consts", content="const A: u8 = 1;"), ROOT, config)
    assert fs.files[ROOT / "consts.rs"] == "const A: u8 = 1;"
    assert ROOT / "consts" not in fs.directories


def test_lib_with_children_writes_directory_then_file(fs: InMemoryFileSystem, config: RestructureConfig) -> None:
    models = LibModule(
        name="models",
        content="pub mod user; pub use self::user::*;",
        children=(LibModule(name="user", content="struct User;"),),
    )

    write_module(fs, models, ROOT, config)

    assert ROOT / "models" in fs.directories
    assert fs.writes == [ROOT / "models" / "user.rs", ROOT / "models.rs"]
    assert fs.files[ROOT / "models" / "user.rs"] == "struct User;"


def test_nested_directories(fs: InMemoryFileSystem, config: RestructureConfig) -> None:
    consts = LibModule(name="consts", content="const A: u8 = 1;")
    api = LibModule(name="api", content="pub mod consts; pub use self::consts::*;", children=(consts,))

    write_modules(fs, [api, EntryModule(content="fn main() {}")], ROOT, config)

    assert fs.files[ROOT / "api" / "consts.rs"] == "const A: u8 = 1;"
    assert fs.files[ROOT / "api.rs"] == "pub mod consts; pub use self::consts::*;"
    assert fs.writes[-1] == ROOT / "main.rs"


def test_module_paths_match_writes(fs: InMemoryFileSystem, config: RestructureConfig) -> None:
    inner = LibModule(name="v1", content="", children=(LibModule(name="consts", content=""),))
    modules = [LibModule(name="api", content="", children=(inner,)), EntryModule(content="")]

    write_modules(fs, modules, ROOT, config)

    expected = [path for module in modules for path in module_paths(module, ROOT, config)]
    assert fs.writes == expected


def test_custom_extension() -> None:
    config = RestructureConfig(extension="txt", entry_file="lib")
    assert module_paths(EntryModule(content=""), ROOT, config) == [ROOT / "lib.txt"]


def test_filesystem_error_aborts(config: RestructureConfig) -> None:
    fs = InMemoryFileSystem()
    with pytest.raises(FileNotFoundError):
        write_modules(fs, [LibModule(name="consts", content=""), EntryModule(content="")], ROOT, config)
    assert fs.writes == []
