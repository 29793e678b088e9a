"""
Template helpers registered on the HTML environment.

- join:   list -> "a, b, c" (anything that is not a list renders as "")
- safe:   sanitized rich text, marked safe so autoescape leaves it alone
- if_any: true when any argument is truthy
"""

from markupsafe import Markup

from vitae.contexts.templating.sanitizer import sanitize_rich


def join_list(value, sep: str = ", ") -> str:
    """Join list items with a separator; non-lists render as an empty string."""
    if not isinstance(value, (list, tuple)):
        return ""
    return sep.join(str(item) for item in value)


def safe_rich(text) -> Markup:
    """Sanitize rich text and mark it safe for output."""
    return Markup(sanitize_rich(text))


def if_any(*values) -> bool:
    """True if any of the values is truthy (e.g. to show a section wrapper)."""
    return any(values)


FILTERS = {
    "join": join_list,
    "safe": safe_rich,
}

GLOBALS = {
    "if_any": if_any,
}
