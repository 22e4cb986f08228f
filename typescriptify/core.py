from __future__ import annotations

from dataclasses import dataclass, field

VOID = "void"
ANY = "any"
ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class VariableInfo:
    name: str
    kind: str
    type: str
    value: str | None = None


@dataclass(frozen=True)
class Parameter:
    name: str
    type: str = ANY
    default: str | None = None


@dataclass(frozen=True)
class FunctionInfo:
    name: str
    parameters: tuple[Parameter, ...]
    content_range: tuple[int, int] | None
    return_type: str = VOID
    is_async: bool = False
    is_generator: bool = False


@dataclass(frozen=True)
class Diagnostic:
    line: int
    column: int
    message: str

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.message}"


@dataclass
class DeclarationTable:
    """Variables keyed by name (first declaration wins) plus every function seen."""

    variables: dict[str, VariableInfo] = field(default_factory=dict)
    functions: list[FunctionInfo] = field(default_factory=list)

    def register_variable(self, info: VariableInfo) -> bool:
        if info.name in self.variables:
            return False
        self.variables[info.name] = info
        return True

    def add_function(self, info: FunctionInfo):
        self.functions.append(info)


def get_text(node, code_bytes: bytes) -> str:
    """Extract source text for a tree-sitter node."""
    return code_bytes[node.start_byte : node.end_byte].decode("utf-8")


def named_items(node) -> list:
    """Named children of ``node`` with comments left out."""
    if node is None:
        return []
    return [child for child in node.named_children if child.type != "comment"]


def position(node) -> tuple[int, int]:
    """1-based line and 0-based column of a node's start."""
    row, column = node.start_point
    return row + 1, column
