from __future__ import annotations

from dataclasses import dataclass

from .emitter import PRETTIER_COMMAND


@dataclass
class TypescriptifyOptions:
    format_output: bool = True
    formatter_command: tuple[str, ...] = PRETTIER_COMMAND

    @classmethod
    def from_args(cls, args) -> TypescriptifyOptions:
        return cls(format_output=not args.no_format)
