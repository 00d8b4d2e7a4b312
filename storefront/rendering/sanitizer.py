"""
HTML Sanitizer

Reduces spreadsheet description markup to a small allow-list of tags.

Rules:
- Allowed tags: p, br, ul, ol, li, strong, em, a
- Any other element is replaced by its plain text (markup dropped, text kept).
  script and style are dropped together with their content.
- Comments, doctypes and other non-text nodes are dropped.
- Non-anchor elements keep no attributes.
- Anchors keep only href and title. Event handler attributes (on*) never
  survive, href must use http:, https:, mailto: or tel:, and every anchor
  gets rel="noopener noreferrer" and target="_blank".
"""

import re

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Comment, PreformattedString

ALLOWED_TAGS = frozenset({'p', 'br', 'ul', 'ol', 'li', 'strong', 'em', 'a'})

# Elements whose content is code, not text
DROPPED_WITH_CONTENT = frozenset({'script', 'style'})

ANCHOR_ATTRIBUTES = frozenset({'href', 'title'})

SAFE_HREF = re.compile(r'^(https?:|mailto:|tel:)', re.IGNORECASE)

ANCHOR_REL = 'noopener noreferrer'
ANCHOR_TARGET = '_blank'


def is_safe_href(href: str) -> bool:
    """Return True if href uses an allowed scheme."""
    return bool(href) and SAFE_HREF.match(href) is not None


def _clean_anchor(tag: Tag) -> None:
    for name in list(tag.attrs):
        lowered = name.lower()
        if lowered.startswith('on') or lowered not in ANCHOR_ATTRIBUTES:
            del tag[name]

    href = tag.get('href')
    if isinstance(href, list):
        href = ' '.join(href)
    if not is_safe_href(href or ''):
        tag.attrs.pop('href', None)

    tag['rel'] = ANCHOR_REL
    tag['target'] = ANCHOR_TARGET


def _walk(root: Tag) -> None:
    """Filter the tree under root in place, one element's children at a time."""
    pending = [root]
    while pending:
        node = pending.pop()
        for child in list(node.children):
            if isinstance(child, Tag):
                name = child.name.lower()
                if name in DROPPED_WITH_CONTENT:
                    child.decompose()
                elif name not in ALLOWED_TAGS:
                    for code in child.find_all(sorted(DROPPED_WITH_CONTENT)):
                        code.decompose()
                    child.replace_with(NavigableString(child.get_text()))
                else:
                    if name == 'a':
                        _clean_anchor(child)
                    else:
                        child.attrs = {}
                    pending.append(child)
            elif isinstance(child, (Comment, PreformattedString)):
                # Comment, CData, Doctype, Declaration, ProcessingInstruction
                child.extract()


def sanitize_html(markup: str) -> str:
    """
    Sanitize a fragment of description markup.

    Args:
        markup: Raw HTML from a spreadsheet cell (may be empty or None)

    Returns:
        Allow-listed HTML, trimmed

    Example:
        >>> sanitize_html('<p class="x">hi<script>alert(1)</script></p>')
        '<p>hi</p>'
    """
    if not markup:
        return ''

    fragment = BeautifulSoup(str(markup), 'html.parser')
    _walk(fragment)
    return fragment.decode().strip()
