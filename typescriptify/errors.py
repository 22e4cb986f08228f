class TypescriptifyError(Exception):
    """Base class for failures that end a run with exit code 1."""


class UsageError(TypescriptifyError):
    pass


class ParseError(TypescriptifyError):
    def __init__(self, path, line: int, column: int, message: str):
        self.path = path
        self.line = line
        self.column = column
        self.message = message
        super().__init__(f"Parse error in {path}:{line}:{column}: {message}")


class FormatterUnavailable(TypescriptifyError):
    pass


class FormatterError(TypescriptifyError):
    def __init__(self, returncode: int, stderr: str):
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip().splitlines()[0] if stderr.strip() else "no output"
        super().__init__(f"Formatter exited with status {returncode}: {detail}")


class EncodingError(TypescriptifyError):
    def __init__(self, path, error: UnicodeDecodeError):
        self.path = path
        self.position = error.start
        super().__init__(f"Encoding error in {path}: invalid UTF-8 byte at offset {error.start}")
