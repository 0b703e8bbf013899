import logging
from collections.abc import Iterable, Sequence

from tree_sitter import Node

from isucon_restruct.config import RestructureConfig
from isucon_restruct.core.ast import parse_source
from isucon_restruct.core.naming import canonical_name
from isucon_restruct.core.spans import ParseContext
from isucon_restruct.models import (
    ApiResource,
    Common,
    Const,
    EntryPoint,
    Fragment,
    Function,
    Mod,
    Model,
    Use,
)

logger = logging.getLogger(__name__)

# Nodes that belong to the next declaration's trivia rather than being declarations.
_TRIVIA_NODE_TYPES = frozenset(
    {"line_comment", "block_comment", "attribute_item", "inner_attribute_item", "empty_statement"}
)
_MODEL_NODE_TYPES = frozenset({"enum_item", "union_item", "trait_item", "type_item"})
_CONST_NODE_TYPES = frozenset({"const_item", "static_item"})
_TUPLE_PUNCTUATION = frozenset({"(", ",", ")"})

# (start_byte, end_byte, replacement)
Edit = tuple[int, int, bytes]


def is_api_resource(content: str, markers: Iterable[str]) -> bool:
    """Lexical check: any marker substring anywhere in the text, comments included."""
    return any(marker in content for marker in markers)


def _text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text else ""


def _name(node: Node) -> str:
    name_node = node.child_by_field_name("name")
    assert name_node is not None, f"{node.type} without a name"
    return _text(name_node)


def _render(source: bytes, node: Node, edits: Sequence[Edit] = ()) -> str:
    chunks: list[bytes] = []
    position = node.start_byte
    for start, end, replacement in sorted(edits):
        chunks.append(source[position:start])
        chunks.append(replacement)
        position = end
    chunks.append(source[position : node.end_byte])
    return b"".join(chunks).decode("utf-8")


def _promote(node: Node) -> Edit:
    for child in node.children:
        if child.type == "visibility_modifier":
            return (child.start_byte, child.end_byte, b"pub")
    return (node.start_byte, node.start_byte, b"pub ")


def _field_edits(struct: Node) -> list[Edit]:
    body = struct.child_by_field_name("body")
    if body is None:
        return []

    if body.type == "field_declaration_list":
        return [_promote(field) for field in body.named_children if field.type == "field_declaration"]

    edits: list[Edit] = []
    visibility: Node | None = None
    for child in body.children:
        if child.type in _TUPLE_PUNCTUATION:
            visibility = None
        elif child.type == "visibility_modifier":
            visibility = child
        elif child.is_named and child.type not in _TRIVIA_NODE_TYPES:
            if visibility is not None:
                edits.append((visibility.start_byte, visibility.end_byte, b"pub"))
            else:
                edits.append((child.start_byte, child.start_byte, b"pub "))
            visibility = None
    return edits


def _impl_parameters(impl: Node) -> set[str]:
    parameters = impl.child_by_field_name("type_parameters")
    if parameters is None:
        return set()
    names: set[str] = set()
    for parameter in parameters.named_children:
        name = parameter.child_by_field_name("name") or parameter.child_by_field_name("left") or parameter
        names.add(_text(name))
    return names


def _impl_target(impl: Node) -> str:
    """Target type text; generic arguments that are only the impl's own parameters are dropped."""
    target = impl.child_by_field_name("type")
    assert target is not None, "impl block without a target type"
    if target.type == "generic_type":
        arguments = target.child_by_field_name("type_arguments")
        base = target.child_by_field_name("type")
        own = _impl_parameters(impl)
        if base is not None and (
            arguments is None or all(_text(argument) in own for argument in arguments.named_children)
        ):
            return _text(base)
    return _text(target)


def _entry_point_text(ctx: ParseContext, fn: Node) -> str:
    body = fn.child_by_field_name("body")
    assert body is not None, "entry routine without a body"
    open_brace, close_brace = body.children[0], body.children[-1]

    body_start = ctx.offset_of(open_brace.end_point)
    parts = [ctx.source[fn.start_byte : body_start].decode("utf-8")]
    ctx.update_offset(body_start)

    for statement in body.named_children:
        if statement.type in _TRIVIA_NODE_TYPES:
            continue
        parts.append(ctx.text_between(ctx.offset_of(statement.start_point)))
        parts.append(_text(statement))
        ctx.update_offset(ctx.offset_of(statement.end_point))

    parts.append(ctx.text_between(ctx.offset_of(close_brace.start_point)))
    parts.append("}")
    return "".join(parts)


def _classify_item(
    ctx: ParseContext,
    item: Node,
    trivia: str,
    config: RestructureConfig,
    top_level: bool,
) -> Fragment:
    match item.type:
        case "function_item":
            name = _name(item)
            if top_level and name == config.entry_routine:
                return EntryPoint(content=trivia + _entry_point_text(ctx, item))
            content = trivia + _render(ctx.source, item, [_promote(item)])
            if is_api_resource(content, config.api_markers):
                return ApiResource(name=canonical_name(name), content=content)
            return Function(name=canonical_name(name), content=content)
        case "struct_item":
            content = trivia + _render(ctx.source, item, [_promote(item), *_field_edits(item)])
            return Model(name=canonical_name(_name(item)), content=content)
        case node_type if node_type in _MODEL_NODE_TYPES:
            content = trivia + _render(ctx.source, item, [_promote(item)])
            return Model(name=canonical_name(_name(item)), content=content)
        case "impl_item":
            return Model(name=canonical_name(_impl_target(item)), content=trivia + _render(ctx.source, item))
        case node_type if node_type in _CONST_NODE_TYPES:
            return Const(content=trivia + _render(ctx.source, item, [_promote(item)]))
        case "use_declaration":
            return Use(content=trivia + _render(ctx.source, item))
        case "mod_item":
            name = canonical_name(_name(item))
            body = item.child_by_field_name("body")
            if body is None:
                return Mod(name=name, fragments=None)
            ctx.update_offset(ctx.offset_of(body.children[0].end_point))
            return Mod(name=name, fragments=tuple(_classify_items(ctx, body.named_children, config, top_level=False)))
        case _:
            return Common(content=trivia + _render(ctx.source, item))


def _classify_items(
    ctx: ParseContext,
    items: Sequence[Node],
    config: RestructureConfig,
    top_level: bool,
) -> list[Fragment]:
    fragments: list[Fragment] = []
    for item in items:
        if item.type in _TRIVIA_NODE_TYPES:
            continue
        trivia = ctx.text_between(ctx.offset_of(item.start_point))
        fragments.append(_classify_item(ctx, item, trivia, config, top_level))
        ctx.update_offset(ctx.offset_of(item.end_point))
    return fragments


def classify_source(source_bytes: bytes, config: RestructureConfig | None = None) -> list[Fragment]:
    """Parse ``source_bytes`` and tag each top-level declaration, recursing into inline modules."""
    config = config or RestructureConfig()
    tree = parse_source(source_bytes)
    ctx = ParseContext(source_bytes)
    fragments = _classify_items(ctx, tree.root_node.named_children, config, top_level=True)
    logger.debug("Classified %d top-level fragments", len(fragments))
    return fragments
