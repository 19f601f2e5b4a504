from pathlib import Path

from tree_sitter import Node, Parser, Tree
from tree_sitter_language_pack import get_parser

from solconv.models import Declaration, DeclarationKind, Visibility

SOLIDITY_LANGUAGE = "solidity"

_CONTAINER_TYPES = frozenset({"contract_declaration", "interface_declaration", "library_declaration"})
_STATE_VARIABLE_TYPES = frozenset({"state_variable_declaration", "constant_variable_declaration"})
_FUNCTION_TYPES = frozenset(
    {
        "function_definition",
        "modifier_definition",
        "constructor_definition",
        "fallback_receive_definition",
    }
)
_CONSTANT_ATTRIBUTES = frozenset({"constant", "immutable"})
_VISIBILITY_KEYWORDS = frozenset(v.value for v in Visibility)


class SolidityParseError(ValueError):
    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


def get_solidity_parser() -> Parser:
    return get_parser(SOLIDITY_LANGUAGE)


def offset_to_line(content: bytes | str, offset: int) -> int:
    """Return the 1-based line containing *offset*."""
    if isinstance(content, bytes):
        return content.count(b"\n", 0, offset) + 1
    return content.count("\n", 0, offset) + 1


def _first_error_node(node: Node) -> Node | None:
    if node.is_error or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _first_error_node(child)
        if found is not None:
            return found
    return node


def parse_source(source_bytes: bytes, path: str = "<source>") -> Tree:
    tree = get_solidity_parser().parse(source_bytes)
    error_node = _first_error_node(tree.root_node)
    if error_node is not None:
        line = error_node.start_point[0] + 1
        raise SolidityParseError(f"Parsing failed: {path}:{line}: invalid Solidity syntax", line=line)
    return tree


# ---------------------------------------------------------------------------
# Declaration extraction
# ---------------------------------------------------------------------------


def _node_text(node: Node, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8")


def _declared_name(node: Node, source_bytes: bytes) -> str | None:
    name_node = node.child_by_field_name("name")
    if name_node is None:
        name_node = next((c for c in node.children if c.type == "identifier"), None)
    return _node_text(name_node, source_bytes) if name_node is not None else None


def _visibility(node: Node, source_bytes: bytes) -> Visibility | None:
    for child in node.children:
        if child.type == "visibility":
            return Visibility(_node_text(child, source_bytes).strip())
        if child.type in _VISIBILITY_KEYWORDS:
            return Visibility(child.type)
    return None


def _function_name(node: Node, source_bytes: bytes) -> str:
    if node.type == "constructor_definition":
        return "constructor"
    if node.type == "fallback_receive_definition":
        return "receive" if any(c.type == "receive" for c in node.children) else "fallback"
    name = _declared_name(node, source_bytes)
    if name is None:
        raise SolidityParseError(f"Unnamed {node.type} at byte {node.start_byte}")
    return name


def _to_declaration(node: Node, source_bytes: bytes, container: str | None) -> Declaration | None:
    if node.type in _STATE_VARIABLE_TYPES:
        name = _declared_name(node, source_bytes)
        if name is None:
            return None
        is_constant = node.type == "constant_variable_declaration" or any(
            c.type in _CONSTANT_ATTRIBUTES for c in node.children
        )
        return Declaration(
            kind=DeclarationKind.STATE_VARIABLE,
            name=name,
            start_byte=node.start_byte,
            is_constant=is_constant,
            visibility=_visibility(node, source_bytes),
            container=container,
        )
    if node.type in _FUNCTION_TYPES:
        return Declaration(
            kind=DeclarationKind.FUNCTION,
            name=_function_name(node, source_bytes),
            start_byte=node.start_byte,
            visibility=_visibility(node, source_bytes),
            container=container,
        )
    return None


def _container_members(node: Node) -> list[Node]:
    body = node.child_by_field_name("body")
    if body is None:
        body = next((c for c in node.children if c.type == "contract_body"), None)
    return list(body.named_children) if body is not None else []


def extract_declarations(tree: Tree, source_bytes: bytes) -> list[Declaration]:
    """Collect file-level declarations and the direct members of contracts, interfaces and libraries.

    Only two levels are visited; function bodies and anything nested deeper are ignored.
    """
    declarations: list[Declaration] = []
    for item in tree.root_node.named_children:
        if item.type in _CONTAINER_TYPES:
            container = _declared_name(item, source_bytes)
            for member in _container_members(item):
                declaration = _to_declaration(member, source_bytes, container)
                if declaration is not None:
                    declarations.append(declaration)
            continue
        declaration = _to_declaration(item, source_bytes, None)
        if declaration is not None:
            declarations.append(declaration)
    return declarations


def extract_declarations_from_source(source_bytes: bytes, path: str = "<source>") -> list[Declaration]:
    return extract_declarations(parse_source(source_bytes, path), source_bytes)


def extract_declarations_from_file(path: str | Path) -> list[Declaration]:
    file_path = Path(path)
    try:
        source_bytes = file_path.read_bytes()
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None
    return extract_declarations_from_source(source_bytes, str(file_path))
