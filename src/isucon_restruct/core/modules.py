import logging
from collections.abc import Sequence
from typing import NamedTuple

from isucon_restruct.core.dedup import dedup_fragments
from isucon_restruct.models import (
    ApiResource,
    Common,
    Const,
    EntryModule,
    EntryPoint,
    Fragment,
    Function,
    LibModule,
    Mod,
    Model,
    Module,
    Use,
)

logger = logging.getLogger(__name__)

RESOURCES = "resources"
FUNCTIONS = "functions"
MODELS = "models"
CONSTS = "consts"
COMMON = "common"


class _Level(NamedTuple):
    fragments: list[Fragment]
    use_text: str
    modules: list[Module]


def mod_text(modules: Sequence[Module]) -> str:
    """Declare and glob re-export every named module."""
    return "\n".join(
        f"pub mod {module.name}; pub use self::{module.name}::*;"
        for module in modules
        if isinstance(module, LibModule)
    )


def _bare_mod(name: str) -> str:
    return f"mod {name};"


def _parent_import(path: Sequence[str]) -> str:
    return f"use crate::{'::'.join([*path, '*'])};"


def _join(*parts: str) -> str:
    return "\n".join(part for part in parts if part)


def _warn_duplicates(modules: Sequence[Module], path: Sequence[str], group: str | None = None) -> None:
    seen: set[str] = set()
    for module in modules:
        if not isinstance(module, LibModule):
            continue
        if module.name in seen:
            scope = "::".join(["crate", *path])
            label = f"{group}/{module.name}" if group else module.name
            logger.warning("Duplicate %s in %s; the later declaration wins", label, scope)
        seen.add(module.name)


def _aggregate(name: str, path: Sequence[str], children: list[Module]) -> LibModule:
    _warn_duplicates(children, path, name)
    return LibModule(name=name, content=mod_text(children), children=tuple(children))


def _build_level(fragments: Sequence[Fragment], path: tuple[str, ...]) -> _Level:
    fragments = dedup_fragments(fragments)

    use_text = "\n".join(fragment.content for fragment in fragments if isinstance(fragment, Use))
    import_block = _join(use_text, _parent_import(path))

    resources: list[Module] = []
    functions: list[Module] = []
    models: list[Module] = []
    consts: list[str] = []
    common: list[str] = []
    nested: list[Module] = []

    for fragment in fragments:
        match fragment:
            case ApiResource(name=name, content=content):
                resources.append(LibModule(name=name, content=_join(import_block, content)))
            case Function(name=name, content=content):
                functions.append(LibModule(name=name, content=_join(import_block, content)))
            case Model(name=name, content=content):
                models.append(LibModule(name=name, content=_join(import_block, content)))
            case Const(content=content):
                consts.append(content)
            case Common(content=content):
                common.append(content)
            case Mod(name=name, fragments=inner) if inner is not None:
                nested.append(_build_namespace(name, inner, (*path, name)))

    modules: list[Module] = [
        _aggregate(RESOURCES, path, resources),
        _aggregate(FUNCTIONS, path, functions),
        _aggregate(MODELS, path, models),
        LibModule(name=CONSTS, content=_join(import_block, "\n".join(consts))),
    ]
    if common:
        modules.append(LibModule(name=COMMON, content=_join(import_block, "\n".join(common))))
    modules.extend(nested)
    _warn_duplicates(modules, path)

    return _Level(fragments=fragments, use_text=use_text, modules=modules)


def _build_namespace(name: str, fragments: Sequence[Fragment], path: tuple[str, ...]) -> LibModule:
    level = _build_level(fragments, path)
    bare = [_bare_mod(f.name) for f in level.fragments if isinstance(f, Mod) and f.fragments is None]
    return LibModule(name=name, content=_join(*bare, mod_text(level.modules)), children=tuple(level.modules))


def build_modules(fragments: Sequence[Fragment]) -> list[Module]:
    """Group the crate root's fragments into output modules.

    Returns ``[resources, functions, models, consts, common?, *namespaces, entry point]``.
    """
    level = _build_level(fragments, ())

    tail: list[str] = []
    for fragment in level.fragments:
        match fragment:
            case EntryPoint(content=content):
                tail.append(content)
            case Mod(name=name, fragments=None):
                tail.append(_bare_mod(name))

    entry = EntryModule(content=_join(level.use_text, mod_text(level.modules), "\n".join(tail)))
    logger.debug("Built %d top-level modules", len(level.modules))
    return [*level.modules, entry]
