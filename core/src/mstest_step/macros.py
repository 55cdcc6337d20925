from __future__ import annotations

import re
from collections.abc import Mapping


_MACRO_PATTERN = re.compile(r"\$([A-Za-z0-9_]+|\{[A-Za-z0-9_.]+\}|\$)")
_LINE_BREAKS = re.compile(r"[\r\n]+")
_ARG_BREAKS = re.compile(r"[\t\r\n]+")
_ARG_WHITESPACE = " \t\r\n\f"
_QUOTES = "\"'"


def expand(text: str, *sources: Mapping[str, str]) -> str:
    """
    Replace `${NAME}` and `$NAME` tokens, one full pass per source in order.

    Unknown names are left untouched and `$$` becomes a literal `$` on every pass.
    """
    for variables in sources:
        text = _expand_once(text, variables)
    return text


def _expand_once(text: str, variables: Mapping[str, str]) -> str:
    def replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key == "$":
            return "$"
        if key.startswith("{"):
            key = key[1:-1]
        value = variables.get(key)
        if value is None:
            return match.group(0)
        return value

    return _MACRO_PATTERN.sub(replace, text)


def tokenize(text: str) -> list[str]:
    """
    Split on whitespace, keeping single- or double-quoted runs together.

    Quotes are dropped and backslashes stay literal so Windows paths survive.
    A quote that never closes runs to the end of the text.
    """
    tokens: list[str] = []
    current: list[str] = []
    in_token = False
    quote: str | None = None
    for char in text:
        if quote is not None:
            if char == quote:
                quote = None
            else:
                current.append(char)
        elif char in _QUOTES:
            quote = char
            in_token = True
        elif char in _ARG_WHITESPACE:
            if in_token:
                tokens.append("".join(current))
                current = []
                in_token = False
        else:
            current.append(char)
            in_token = True
    if in_token:
        tokens.append("".join(current))
    return tokens


def normalize_whitespace(text: str) -> str:
    return _ARG_BREAKS.sub(" ", text)


def split_lines(text: str) -> list[str]:
    return [line for line in _LINE_BREAKS.split(text) if line]
