import logging
import os
import shutil
import subprocess

from .errors import FormatterError, FormatterUnavailable

logger = logging.getLogger(__name__)

HEADER = "// Auto-generated TypeScript from {source_name}\n\n"

PRETTIER_COMMAND = ("prettier", "--parser", "typescript")


def render_variable(var) -> str:
    initializer = f" = {var.value}" if var.value is not None else ""
    return f"{var.kind} {var.name}: {var.type}{initializer};\n"


def render_parameter(param) -> str:
    default = f" = {param.default}" if param.default is not None else ""
    return f"{param.name}: {param.type}{default}"


def render_function(fn, code_bytes: bytes) -> str:
    params = ", ".join(render_parameter(p) for p in fn.parameters)
    body = ""
    if fn.content_range is not None:
        start, end = fn.content_range
        body = code_bytes[start:end].decode("utf-8")
    prefix = "async " if fn.is_async else ""
    star = "*" if fn.is_generator else ""
    return f"{prefix}function{star} {fn.name}({params}): {fn.return_type} {{{body}}}"


def render_typescript(source_name, code_bytes: bytes, variables, functions) -> str:
    """Build the TypeScript text for the collected declarations.

    ``variables`` is iterated in insertion order and ``functions`` in
    traversal order. Function definitions are concatenated without a
    separator; the formatter pass lays them out.
    """
    parts = [HEADER.format(source_name=os.path.basename(str(source_name)))]
    parts.extend(render_variable(v) for v in variables)
    parts.append("\n")
    parts.extend(render_function(fn, code_bytes) for fn in functions)
    return "".join(parts)


# ── Formatting ──────────────────────────────────────────────────────


def formatter_available(command=PRETTIER_COMMAND) -> bool:
    return shutil.which(command[0]) is not None


def format_typescript(text: str, command=PRETTIER_COMMAND) -> str:
    """Run the text through prettier with the TypeScript parser."""
    executable = shutil.which(command[0])
    if executable is None:
        raise FormatterUnavailable(
            f"{command[0]} not found. Install it for better output formatting, or pass --no-format."
        )
    logger.debug("formatting with %s", " ".join(command))
    proc = subprocess.run(
        [executable, *command[1:]],
        input=text.encode("utf-8"),
        capture_output=True,
    )
    if proc.returncode != 0:
        raise FormatterError(proc.returncode, proc.stderr.decode("utf-8", errors="replace"))
    return proc.stdout.decode("utf-8")
