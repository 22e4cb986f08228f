from tree_sitter import Language, Parser
from tree_sitter_javascript import language

from .core import get_text, position
from .errors import EncodingError, ParseError

JS_LANGUAGE = Language(language())


def make_parser() -> Parser:
    ts_parser = Parser()
    ts_parser.language = JS_LANGUAGE
    return ts_parser


def _first_problem(node):
    """Depth-first search for the first ERROR or MISSING node."""
    if node.is_missing or node.type == "ERROR":
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _first_problem(child)
        if found is not None:
            return found
    return None


def parse_source(code_bytes: bytes, path="<source>", ts_parser=None):
    """Parse UTF-8 JavaScript bytes, raising ``ParseError`` when the tree is not clean."""
    try:
        code_bytes.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(path, e) from e
    ts_parser = ts_parser or make_parser()
    tree = ts_parser.parse(code_bytes)
    root = tree.root_node
    if root.has_error:
        bad = _first_problem(root) or root
        line, column = position(bad)
        if bad.is_missing:
            message = f"missing '{bad.type}'"
        else:
            snippet = get_text(bad, code_bytes).strip().splitlines()
            token = snippet[0][:40] if snippet else ""
            message = f"unexpected '{token}'" if token else "unexpected end of input"
        raise ParseError(path, line, column, message)
    return tree
