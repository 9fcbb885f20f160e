"""Splits source text into string tokens.

Parentheses are always tokens of their own. Any other run of non-whitespace
characters is one opaque atom: there are no strings, comments or escapes.
"""

from __future__ import annotations

LPAREN = "("
RPAREN = ")"


def tokenize(source: str) -> list[str]:
    """Return the tokens of `source`; empty or blank input gives []."""
    padded = source.replace(LPAREN, f" {LPAREN} ").replace(RPAREN, f" {RPAREN} ")
    return padded.split()
