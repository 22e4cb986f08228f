from .collector import DeclarationCollector, collect_declarations
from .core import Diagnostic, FunctionInfo, Parameter, VariableInfo, get_text
from .emitter import format_typescript, render_typescript
from .inference import infer_expression_type
from .parsing import make_parser, parse_source
from .pipeline import dump_ast_file, typescriptify_file, typescriptify_source

__all__ = [
    "DeclarationCollector",
    "Diagnostic",
    "FunctionInfo",
    "Parameter",
    "VariableInfo",
    "collect_declarations",
    "dump_ast_file",
    "format_typescript",
    "get_text",
    "infer_expression_type",
    "make_parser",
    "parse_source",
    "render_typescript",
    "typescriptify_file",
    "typescriptify_source",
]
