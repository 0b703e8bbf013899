from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Fragments: one per top-level declaration (or declaration group)
# ---------------------------------------------------------------------------


class EntryPoint(_Frozen):
    kind: Literal["entry_point"] = "entry_point"
    content: str


class ApiResource(_Frozen):
    kind: Literal["api_resource"] = "api_resource"
    name: str
    content: str


class Function(_Frozen):
    kind: Literal["function"] = "function"
    name: str
    content: str


class Model(_Frozen):
    kind: Literal["model"] = "model"
    name: str
    content: str


class Const(_Frozen):
    kind: Literal["const"] = "const"
    content: str


class Use(_Frozen):
    kind: Literal["use"] = "use"
    content: str


class Mod(_Frozen):
    """A namespace. ``fragments is None`` means the body lives in another file."""

    kind: Literal["mod"] = "mod"
    name: str
    fragments: tuple["Fragment", ...] | None = None


class Common(_Frozen):
    kind: Literal["common"] = "common"
    content: str


Fragment = Annotated[
    EntryPoint | ApiResource | Function | Model | Const | Use | Mod | Common,
    Field(discriminator="kind"),
]

Mod.model_rebuild()  # necessary for recursive types


# ---------------------------------------------------------------------------
# Modules: one per output file (plus directory when it has children)
# ---------------------------------------------------------------------------


class EntryModule(_Frozen):
    kind: Literal["entry_point"] = "entry_point"
    content: str


class LibModule(_Frozen):
    kind: Literal["lib"] = "lib"
    name: str
    content: str
    children: tuple["Module", ...] = ()


Module = Annotated[EntryModule | LibModule, Field(discriminator="kind")]

LibModule.model_rebuild()
