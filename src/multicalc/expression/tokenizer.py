from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from multicalc.errors import ParseError


class TokenType(StrEnum):
    NUMBER = "number"
    NAME = "name"
    OPERATOR = "operator"
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    END = "end"


OPERATOR_CHARS = "+-*/^"


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    position: int


def tokenize(text: str) -> list[Token]:
    """
    Split an expression into tokens, always ending with an END token.

    Numbers are decimal literals ("3", "2.5", ".5", "1e-3"); names are runs
    of letters; whitespace is skipped.

    Raises:
        ParseError: On a character that cannot start any token.
    """
    tokens: list[Token] = []
    i = 0
    n = len(text)

    while i < n:
        char = text[i]

        if char.isspace():
            i += 1
            continue

        if char.isdigit() or char == ".":
            start = i
            while i < n and text[i].isdigit():
                i += 1
            if i < n and text[i] == ".":
                i += 1
                while i < n and text[i].isdigit():
                    i += 1
            literal = text[start:i]
            if literal == ".":
                raise ParseError("Lone decimal point", start)
            # Exponent only when followed by digits, so "2e" stays an error
            if i < n and text[i] in "eE":
                j = i + 1
                if j < n and text[j] in "+-":
                    j += 1
                if j < n and text[j].isdigit():
                    while j < n and text[j].isdigit():
                        j += 1
                    i = j
            tokens.append(Token(TokenType.NUMBER, text[start:i], start))
            continue

        if char.isalpha():
            start = i
            while i < n and text[i].isalpha():
                i += 1
            tokens.append(Token(TokenType.NAME, text[start:i], start))
            continue

        if char in OPERATOR_CHARS:
            tokens.append(Token(TokenType.OPERATOR, char, i))
        elif char == "(":
            tokens.append(Token(TokenType.LPAREN, char, i))
        elif char == ")":
            tokens.append(Token(TokenType.RPAREN, char, i))
        elif char == ",":
            tokens.append(Token(TokenType.COMMA, char, i))
        else:
            raise ParseError(f"Unexpected character '{char}'", i)
        i += 1

    tokens.append(Token(TokenType.END, "", n))
    return tokens
