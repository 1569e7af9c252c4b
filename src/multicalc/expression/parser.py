"""
Recursive-descent parser for graph expressions.

Grammar (lowest to highest precedence):

    expr    := term (("+" | "-") term)*
    term    := unary (("*" | "/") unary)*
    unary   := "-" unary | power
    power   := primary ("^" unary)?
    primary := NUMBER | "x" | NAME "(" expr ("," expr)* ")" | "(" expr ")"

'^' binds tighter than unary minus (-2^2 == -4) and is right-associative
(2^3^2 == 2^9); the other binary operators are left-associative.
Every nested parenthesis, call, unary minus, power or chained binary
operator counts as one level of depth; more than MAX_EXPRESSION_DEPTH levels
is a ParseError, which also bounds the recursion of the evaluator.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from multicalc.config import MAX_EXPRESSION_DEPTH
from multicalc.errors import ParseError
from multicalc.expression.nodes import BinaryOp, Call, Literal, Node, UnaryOp, Variable
from multicalc.expression.tokenizer import Token, TokenType, tokenize

VARIABLE_NAME = "x"

FUNCTION_ARITY: dict[str, int] = {
    "sin": 1,
    "cos": 1,
    "tan": 1,
    "log": 1,
    "ln": 1,
    "sqrt": 1,
    "pow": 2,
}


class Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.tokens = tokenize(text)
        self.index = 0
        self.depth = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        if token.type != TokenType.END:
            self.index += 1
        return token

    def _descend(self, token: Token) -> None:
        self.depth += 1
        if self.depth > MAX_EXPRESSION_DEPTH:
            raise ParseError(
                f"Expression is nested more than {MAX_EXPRESSION_DEPTH} levels deep", token.position
            )

    @contextmanager
    def _nested(self, token: Token) -> Iterator[None]:
        depth = self.depth
        self._descend(token)
        try:
            yield
        finally:
            self.depth = depth

    def _at_operator(self, *ops: str) -> bool:
        return self.current.type == TokenType.OPERATOR and self.current.text in ops

    def _expect(self, token_type: TokenType) -> Token:
        token = self.current
        if token.type != token_type:
            found = token.text or "end of input"
            raise ParseError(f"Expected '{token_type}' but found '{found}'", token.position)
        return self._advance()

    def parse(self) -> Node:
        if self.current.type == TokenType.END:
            raise ParseError("Empty expression", 0)
        node = self._expr()
        if self.current.type != TokenType.END:
            raise ParseError(f"Unexpected '{self.current.text}'", self.current.position)
        return node

    def _expr(self) -> Node:
        depth = self.depth
        node = self._term()
        while self._at_operator("+", "-"):
            token = self._advance()
            # a left-deep chain is as deep as it is long
            self._descend(token)
            node = BinaryOp(token.text, node, self._term())
        self.depth = depth
        return node

    def _term(self) -> Node:
        depth = self.depth
        node = self._unary()
        while self._at_operator("*", "/"):
            token = self._advance()
            self._descend(token)
            node = BinaryOp(token.text, node, self._unary())
        self.depth = depth
        return node

    def _unary(self) -> Node:
        if self._at_operator("-"):
            token = self._advance()
            with self._nested(token):
                return UnaryOp("-", self._unary())
        return self._power()

    def _power(self) -> Node:
        base = self._primary()
        if self._at_operator("^"):
            token = self._advance()
            with self._nested(token):
                return BinaryOp("^", base, self._unary())
        return base

    def _primary(self) -> Node:
        token = self.current

        if token.type == TokenType.NUMBER:
            self._advance()
            try:
                return Literal(float(token.text))
            except ValueError as e:
                raise ParseError(f"Invalid number '{token.text}'", token.position) from e

        if token.type == TokenType.NAME:
            self._advance()
            if token.text == VARIABLE_NAME:
                return Variable(token.text)
            if token.text in FUNCTION_ARITY:
                with self._nested(token):
                    return self._call(token)
            raise ParseError(f"Unknown name '{token.text}'", token.position)

        if token.type == TokenType.LPAREN:
            self._advance()
            with self._nested(token):
                node = self._expr()
            self._expect(TokenType.RPAREN)
            return node

        found = token.text or "end of input"
        raise ParseError(f"Expected a number, 'x', a function or '(' but found '{found}'", token.position)

    def _call(self, name: Token) -> Call:
        self._expect(TokenType.LPAREN)
        args = [self._expr()]
        while self.current.type == TokenType.COMMA:
            self._advance()
            args.append(self._expr())
        self._expect(TokenType.RPAREN)

        arity = FUNCTION_ARITY[name.text]
        if len(args) != arity:
            raise ParseError(
                f"{name.text}() takes {arity} argument(s), got {len(args)}", name.position
            )
        return Call(name.text, tuple(args))


def parse(text: str) -> Node:
    """
    Parse `text` into an AST.

    Raises:
        ParseError: For malformed input, unknown names or wrong arity.
    """
    return Parser(text).parse()
