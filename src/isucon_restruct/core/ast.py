from typing import cast

from tree_sitter import Node, Tree
from tree_sitter_language_pack import SupportedLanguage, get_parser

from isucon_restruct.errors import SourceParseError

SOURCE_LANGUAGE = "rust"


def _first_error(node: Node) -> Node | None:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def parse_source(source_bytes: bytes, language: str = SOURCE_LANGUAGE) -> Tree:
    """Parse ``source_bytes`` and reject trees that contain syntax errors."""
    parser = get_parser(cast(SupportedLanguage, language))
    tree = parser.parse(source_bytes)

    root = tree.root_node
    if root.has_error:
        error = _first_error(root) or root
        row, column = error.start_point[0], error.start_point[1]
        if error.is_missing:
            detail = f"missing {error.type!r}"
        else:
            snippet = source_bytes[error.start_byte : error.end_byte].decode("utf-8", errors="replace")
            detail = f"unexpected {snippet.splitlines()[0] if snippet else 'end of input'!r}"
        raise SourceParseError(row + 1, column + 1, detail)

    return tree
