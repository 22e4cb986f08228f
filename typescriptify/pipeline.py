"""Read, parse, collect, emit, format, write."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .collector import collect_declarations
from .config import TypescriptifyOptions
from .core import Diagnostic
from .dump import dump_ast
from .emitter import format_typescript, render_typescript
from .parsing import parse_source

logger = logging.getLogger(__name__)


@dataclass
class TypescriptifyResult:
    output_path: Path
    num_variables: int
    num_functions: int
    diagnostics: list[Diagnostic] = field(default_factory=list)


def _read(input_path: Path):
    code_bytes = input_path.read_bytes()
    return code_bytes, parse_source(code_bytes, path=input_path)


def typescriptify_source(code_bytes: bytes, source_name="<source>", options=None):
    """Return ``(text, collector)`` for JavaScript held in memory."""
    options = options or TypescriptifyOptions()
    tree = parse_source(code_bytes, path=source_name)
    collector = collect_declarations(tree.root_node, code_bytes)
    text = render_typescript(
        source_name,
        code_bytes,
        collector.table.variables.values(),
        collector.table.functions,
    )
    if options.format_output:
        text = format_typescript(text, options.formatter_command)
    return text, collector


def typescriptify_file(input_path, output_path, options=None) -> TypescriptifyResult:
    input_path, output_path = Path(input_path), Path(output_path)
    code_bytes = input_path.read_bytes()
    text, collector = typescriptify_source(code_bytes, input_path, options)

    output_path.write_text(text, encoding="utf-8")
    logger.debug("wrote %d bytes to %s", len(text), output_path)

    return TypescriptifyResult(
        output_path=output_path,
        num_variables=len(collector.table.variables),
        num_functions=len(collector.table.functions),
        diagnostics=collector.diagnostics,
    )


def dump_ast_file(input_path, output_path) -> Path:
    input_path, output_path = Path(input_path), Path(output_path)
    code_bytes, tree = _read(input_path)
    output_path.write_text(dump_ast(tree, code_bytes), encoding="utf-8")
    return output_path
