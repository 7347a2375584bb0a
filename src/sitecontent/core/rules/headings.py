"""Heading anchors: slug ids first, then a prepended self-link per heading"""

from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from sitecontent.core.utils.slug import Slugger
from sitecontent.core.utils.tokens import inline_text, iter_headings


ANCHOR_ICON = '<span class="icon icon-link"></span>'


def heading_slug_rule(state: StateCore) -> None:
    """Assign a unique GitHub-style id to every heading that lacks one."""
    slugger = Slugger()
    for heading, inline in iter_headings(state.tokens):
        if heading.attrGet('id'):
            continue
        slug = slugger.slug(inline_text(inline))
        if slug:
            heading.attrSet('id', slug)


def autolink_heading_rule(state: StateCore) -> None:
    """Prepend <a href="#id"> to the content of each heading with an id."""
    for heading, inline in iter_headings(state.tokens):
        anchor_id = heading.attrGet('id')
        if not anchor_id:
            continue
        link_open = Token('link_open', 'a', 1, attrs={
            'aria-hidden': 'true',
            'tabindex': '-1',
            'class': 'anchor',
            'href': f'#{anchor_id}',
        })
        icon = Token('html_inline', '', 0, content=ANCHOR_ICON)
        link_close = Token('link_close', 'a', -1)
        inline.children = [link_open, icon, link_close] + list(inline.children or [])
