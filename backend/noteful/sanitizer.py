"""
Noteful Backend — XSS Sanitizer
=================================

What:  `sanitize(text)` escapes or strips executable markup from user text.
Why:   Folder and note names/contents are stored exactly as submitted and are
       rendered by the frontend; every response passes them through here.
How:   bleach.clean with a small allow-list of formatting tags. Disallowed
       tags are escaped (`<script>` → `&lt;script&gt;`), disallowed
       attributes such as `onerror` are dropped.
"""

from typing import Optional

import bleach

ALLOWED_TAGS = frozenset({
    "a", "b", "blockquote", "br", "code", "em", "i", "img",
    "li", "ol", "p", "pre", "strong", "u", "ul",
})

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "target"],
    "img": ["src", "alt", "title", "width", "height"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})


def sanitize(value: Optional[str]) -> Optional[str]:
    """Return `value` with unsafe markup neutralised. None passes through."""
    if value is None:
        return None
    return bleach.clean(
        value,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=False,
    )
