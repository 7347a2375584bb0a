"""Syntax highlighting of fenced code blocks with Pygments"""

import logging

from markdown_it.common.utils import escapeHtml
from markdown_it.rules_core import StateCore
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound


logger = logging.getLogger(__name__)


def highlight_code(code: str, lang: str) -> str | None:
    """Return Pygments span markup for code, or None when lang has no lexer."""
    if not lang:
        return None
    try:
        lexer = get_lexer_by_name(lang, stripnl=False)
    except ClassNotFound:
        logger.debug("No lexer for language %r, leaving block unhighlighted", lang)
        return None
    return highlight(code, lexer, HtmlFormatter(nowrap=True))


def highlight_rule(state: StateCore) -> None:
    """Tokenize every fence and store the markup in token.meta['highlighted']."""
    for tok in state.tokens:
        if tok.type != 'fence':
            continue
        lang = tok.info.strip().split(maxsplit=1)[0] if tok.info.strip() else ''
        tok.meta['language'] = lang
        highlighted = highlight_code(tok.content, lang)
        if highlighted is not None:
            tok.meta['highlighted'] = highlighted


def render_fence(self, tokens, idx, options, env) -> str:
    """Render a fence from its pre-highlighted markup, else fall back to the default."""
    tok = tokens[idx]
    highlighted = tok.meta.get('highlighted')
    if highlighted is None:
        return self.fence(tokens, idx, options, env)
    lang = escapeHtml(tok.meta['language'])
    return (
        f'<pre class="language-{lang}"><code class="language-{lang}">'
        f'{highlighted}</code></pre>\n'
    )
