"""
Rich-text sanitization for personal content.

Personal fields such as the summary or item descriptions may carry a little
inline markup. Only a fixed allow-list of tags survives, with every attribute
removed; other tags are unwrapped (their text is kept). Script and style
elements are dropped together with their content, as are comments, doctypes,
CDATA sections and processing instructions.
"""

from bs4 import BeautifulSoup, CData, Comment, Declaration, Doctype, ProcessingInstruction

ALLOWED_TAGS = frozenset({"b", "i", "em", "strong", "u", "br"})
DROPPED_TAGS = ("script", "style")
DROPPED_NODES = (Comment, CData, Declaration, Doctype, ProcessingInstruction)


def sanitize_rich(text) -> str:
    """
    Return text with only allow-listed inline markup.

    Examples:
        >>> sanitize_rich('<b onclick="x()">Bold</b> <a href="#">link</a>')
        '<b>Bold</b> link'
        >>> sanitize_rich(None)
        ''
    """
    if not text:
        return ""

    soup = BeautifulSoup(str(text), "html.parser")

    for tag_name in DROPPED_TAGS:
        for tag in soup.find_all(tag_name):
            tag.decompose()

    for node in soup.find_all(string=lambda s: isinstance(s, DROPPED_NODES)):
        node.extract()

    for tag in soup.find_all(True):
        if tag.name in ALLOWED_TAGS:
            tag.attrs = {}
        else:
            tag.unwrap()

    return str(soup)
