"""
  Lisp Reader

- Recursive descent with one token of lookahead
- Consumes tokens from the front of a list, leaving the rest for later reads
- Emits Python values:

    - lists -> Python list
    - integers -> numpy.int32
    - decimals -> numpy.float32 (with an f suffix) or numpy.float64
    - anything else -> Symbol
"""

from __future__ import annotations

from typing import Iterator, Optional

from minilisp import SExpression
from minilisp.errors import UnexpectedEOF, UnmatchedCloseParen
from minilisp.reader.tokenizer import LPAREN, RPAREN, tokenize
from minilisp.types.numeric import atom


class TokenStream:
    """Reads expressions from a token list, popping tokens as it goes.

    The list is shared, not copied: tokens left after a read stay in it.
    """

    def __init__(self, tokens: list[str]):
        self.tokens = tokens

    def peek(self) -> Optional[str]:
        return self.tokens[0] if self.tokens else None

    def advance(self) -> str:
        if not self.tokens:
            raise UnexpectedEOF("unexpected EOF while reading")
        return self.tokens.pop(0)

    def exhausted(self) -> bool:
        return not self.tokens

    def parse_expr(self) -> SExpression:
        token = self.advance()

        if token == LPAREN:
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise UnexpectedEOF("unexpected EOF while reading list")
                if nxt == RPAREN:
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if token == RPAREN:
            raise UnmatchedCloseParen("unexpected ')'")

        return atom(token)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.exhausted():
            yield self.parse_expr()


def read(tokens: list[str]) -> SExpression:
    """Read one expression from the front of `tokens`, removing what it consumes."""
    return TokenStream(tokens).parse_expr()


def parse(source: str) -> SExpression:
    return read(tokenize(source))


def parse_all(source: str) -> list[SExpression]:
    return list(TokenStream(tokenize(source)).parse_all())
