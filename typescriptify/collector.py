import logging

from .core import (
    ANONYMOUS,
    ANY,
    VOID,
    DeclarationTable,
    Diagnostic,
    FunctionInfo,
    Parameter,
    VariableInfo,
    get_text,
    named_items,
    position,
)
from .inference import LITERAL_NODES, array_element_types, infer_expression_type, unwrap

logger = logging.getLogger(__name__)

DECLARATION_KINDS = frozenset({"var", "let", "const"})


class DeclarationCollector:
    """Walks a tree-sitter JavaScript tree and records variables and functions.

    The walk is depth-first pre-order over every node. Node types with a
    ``_visit_<type>`` method get handled there; all nodes then have their
    children walked, so nested declarations are collected too.
    """

    def __init__(self, code_bytes: bytes):
        self.code_bytes = code_bytes
        self.table = DeclarationTable()
        self.diagnostics: list[Diagnostic] = []

    def collect(self, root) -> DeclarationTable:
        self._traverse(root)
        return self.table

    # ── helpers ───────────────────────────────────────────────────

    def _warn(self, node, message):
        line, column = position(node)
        diagnostic = Diagnostic(line, column, message)
        self.diagnostics.append(diagnostic)
        logger.warning("%s", diagnostic)

    def _traverse(self, node):
        visitor = getattr(self, f"_visit_{node.type}", None)
        if visitor:
            visitor(node)
        for child in node.children:
            self._traverse(child)

    # ── variables ─────────────────────────────────────────────────

    def _visit_variable_declaration(self, node):
        self._handle_declaration(node)

    def _visit_lexical_declaration(self, node):
        self._handle_declaration(node)

    def _visit_for_in_statement(self, node):
        kind = node.child_by_field_name("kind")
        if kind is None:
            kind = next((c for c in node.children if c.type in DECLARATION_KINDS), None)
        left = node.child_by_field_name("left")
        if kind is None or left is None:
            # plain assignment target, not a declaration
            return
        if left.type != "identifier":
            self._warn(left, "destructuring declarations are not supported; skipped")
            return
        name = get_text(left, self.code_bytes)
        if not self.table.register_variable(VariableInfo(name=name, kind=kind.type, type=ANY)):
            logger.debug("'%s' already declared; keeping the first declaration", name)

    def _handle_declaration(self, node):
        kind = node.children[0].type
        for declarator in named_items(node):
            if declarator.type != "variable_declarator":
                continue
            name_node = declarator.child_by_field_name("name")
            if name_node is None or name_node.type != "identifier":
                self._warn(declarator, "destructuring declarations are not supported; skipped")
                continue
            name = get_text(name_node, self.code_bytes)
            init = declarator.child_by_field_name("value")
            inferred = infer_expression_type(init, self.code_bytes)

            literal = unwrap(init)
            value = None
            if literal is not None and literal.type in LITERAL_NODES:
                value = get_text(init, self.code_bytes)

            registered = self.table.register_variable(
                VariableInfo(name=name, kind=kind, type=inferred, value=value)
            )
            if not registered:
                logger.debug("'%s' already declared; keeping the first declaration", name)
                continue

            element_types = set(array_element_types(init, self.code_bytes))
            if len(element_types) > 1:
                self._warn(
                    declarator,
                    f"array '{name}' mixes element types ({', '.join(sorted(element_types))}); typed as {inferred}",
                )
            if kind == "const" and init is not None and value is None:
                self._warn(
                    declarator,
                    f"const '{name}' has a non-literal initializer and is emitted without a value",
                )

    # ── functions ─────────────────────────────────────────────────

    def _visit_function_declaration(self, node):
        name_node = node.child_by_field_name("name")
        name = get_text(name_node, self.code_bytes) if name_node else ANONYMOUS
        is_async = any(child.type == "async" for child in node.children)
        is_generator = any(child.type == "*" for child in node.children)

        params = [self._parameter(p) for p in named_items(node.child_by_field_name("parameters"))]

        statements = named_items(node.child_by_field_name("body"))
        if statements:
            content_range = (statements[0].start_byte, statements[-1].end_byte)
        else:
            content_range = None
            logger.debug("function '%s' has an empty body", name)

        return_type = VOID
        for stmt in statements:
            if stmt.type == "return_statement":
                argument = named_items(stmt)
                return_type = infer_expression_type(argument[0] if argument else None, self.code_bytes)
                break
        if is_async or is_generator:
            return_type = ANY

        self.table.add_function(
            FunctionInfo(
                name=name,
                parameters=tuple(params),
                content_range=content_range,
                return_type=return_type,
                is_async=is_async,
                is_generator=is_generator,
            )
        )

    _visit_generator_function_declaration = _visit_function_declaration

    def _parameter(self, node):
        if node.type == "assignment_pattern":
            left = node.child_by_field_name("left")
            right = node.child_by_field_name("right")
            return Parameter(
                name=get_text(left, self.code_bytes),
                default=get_text(right, self.code_bytes) if right else None,
            )
        return Parameter(name=get_text(node, self.code_bytes))


def collect_declarations(root, code_bytes: bytes) -> DeclarationCollector:
    collector = DeclarationCollector(code_bytes)
    collector.collect(root)
    return collector
