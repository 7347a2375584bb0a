"""Shared markdown-it token utilities"""

from typing import Iterator

from markdown_it.token import Token


TEXT_TYPES = {'text', 'code_inline', 'text_special'}


def inline_text(token: Token) -> str:
    """Return the plain text of an inline token, ignoring markup and raw HTML."""
    if not token.children:
        return token.content
    return ''.join(c.content for c in token.children if c.type in TEXT_TYPES)


def iter_headings(tokens: list[Token]) -> Iterator[tuple[Token, Token]]:
    """Yield (heading_open, inline) pairs in document order."""
    for i, tok in enumerate(tokens):
        if tok.type == 'heading_open' and i + 1 < len(tokens) and tokens[i + 1].type == 'inline':
            yield tok, tokens[i + 1]
