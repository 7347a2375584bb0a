"""Code block titles from fence info strings: ```python:hello.py"""

from markdown_it.common.utils import escapeHtml
from markdown_it.rules_core import StateCore
from markdown_it.token import Token


TITLE_SEPARATOR = ':'


def split_info(info: str) -> tuple[str, str | None]:
    """Split 'lang:title rest' into ('lang rest', 'title'); title is None if absent."""
    word, sep, rest = info.strip().partition(' ')
    if TITLE_SEPARATOR not in word:
        return info, None
    lang, _, title = word.partition(TITLE_SEPARATOR)
    cleaned = f"{lang}{sep}{rest}".strip()
    return cleaned, title or None


def code_title_rule(state: StateCore) -> None:
    """Strip titles from fence info and insert a code_title token before the fence."""
    tokens = state.tokens
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok.type == 'fence' and TITLE_SEPARATOR in tok.info:
            info, title = split_info(tok.info)
            tok.info = info
            if title:
                title_tok = Token('code_title', 'div', 0, content=title, map=tok.map, level=tok.level, block=True)
                tok.meta['title'] = title
                tokens.insert(i, title_tok)
                i += 1
        i += 1


def render_code_title(self, tokens, idx, options, env) -> str:
    return f'<div class="code-title">{escapeHtml(tokens[idx].content)}</div>\n'
