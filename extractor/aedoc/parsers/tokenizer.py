"""Tokenizer that splits an AEDoc comment into text, block tags and inline tags."""

import re
from typing import Callable, List, Optional

from ..models.token import Token, TokenType


class Tokenizer:
    """One-token-lookahead stream over an AEDoc comment.

    Recognizes:
    - inline tags wrapped in curly braces, e.g. ``{@link Foo.bar | label}``;
      ``\\{`` and ``\\}`` may appear escaped inside the braces
    - block tags such as ``@remarks`` that start at the beginning of the text
      or after whitespace, and end at whitespace or the end of the text

    Everything else is returned as text tokens with their original spacing, so
    that paragraph breaks survive for the markdown-ish parser.
    """

    _AEDOC_TAG_RE = re.compile(
        r"\{\s*@(?:\\\{|\\\}|[^{}])*\}|(?<!\S)@[A-Za-z_]+(?=\s|$)"
    )
    _INLINE_TAG_RE = re.compile(r"(@[A-Za-z_]+)(.*)", re.DOTALL)

    def __init__(self, docs: str, report_error: Callable[[str], None]):
        """Tokenize the comment text up front.

        Args:
            docs: AEDoc comment text, without the comment delimiters.
            report_error: Called with a message for each malformed inline tag.
        """
        self._report_error = report_error
        self._tokens: List[Token] = self._tokenize_docs(docs)
        self._index = 0

    def peek_token(self) -> Optional[Token]:
        """Return the next token without consuming it, or None at the end."""
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def get_token(self) -> Optional[Token]:
        """Consume and return the next token, or None at the end."""
        token = self.peek_token()
        if token is not None:
            self._index += 1
        return token

    def _tokenize_docs(self, docs: str) -> List[Token]:
        tokens: List[Token] = []
        if not docs:
            return tokens

        docs = docs.replace("\r", "")
        position = 0
        for match in self._AEDOC_TAG_RE.finditer(docs):
            if match.start() > position:
                tokens.append(Token(TokenType.TEXT, text=docs[position : match.start()]))

            entry = match.group(0)
            if entry.startswith("{"):
                token = self._tokenize_inline(entry)
                if token is not None:
                    tokens.append(token)
            else:
                tokens.append(Token(TokenType.BLOCK_TAG, tag=entry))
            position = match.end()

        if position < len(docs):
            tokens.append(Token(TokenType.TEXT, text=docs[position:]))
        return tokens

    def _tokenize_inline(self, entry: str) -> Optional[Token]:
        content = entry[1:-1].strip()
        match = self._INLINE_TAG_RE.match(content)
        if not match:
            self._report_error("Content of inline tags should start with a leading '@'")
            return None

        text = match.group(2).replace("\\{", "{").replace("\\}", "}")
        return Token(TokenType.INLINE_TAG, tag=match.group(1), text=text.strip())
