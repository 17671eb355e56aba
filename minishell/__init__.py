"""Pieces of a small command shell: syntax checks, tokenizing, expansion, builtins and pipelines."""

__version__ = "0.1.0"

__all__ = [
    "builtins",
    "cstr",
    "environment",
    "executor",
    "expand",
    "lexer",
    "model",
    "syntax",
]