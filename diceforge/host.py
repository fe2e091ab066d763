"""Host document model and the one-time shared resource bootstrap."""

import re

from .defs import SHARED_DEFS_ID, build_shared_resources
from .logging_setup import get_logger
from .svg import SVG_NS, element, to_string

logger = get_logger(__name__)

_ID_RE = re.compile(r'(?<![\w-])id="([^"]*)"')


class HostDocument:
    """Minimal page that rendered dice and shared definitions are added to.

    Stores markup fragments in insertion order and answers id lookups over
    them, which is all the bootstrap's presence check needs.
    """

    def __init__(self):
        self.fragments = []

    def append(self, markup):
        self.fragments.append(markup)

    def count_elements(self, element_id):
        return sum(
            _ID_RE.findall(fragment).count(element_id)
            for fragment in self.fragments
        )

    def has_element(self, element_id):
        return self.count_elements(element_id) > 0

    def to_html(self):
        return "<body>\n" + "\n".join(self.fragments) + "\n</body>"


_host_document = None


def get_host_document():
    """Process-wide default document; created on first use, never reset."""
    global _host_document
    if _host_document is None:
        _host_document = HostDocument()
    return _host_document


def build_shared_defs_markup():
    """Hidden zero-size ``<svg>`` carrying the shared resources."""
    svg = element("svg", {
        "id": SHARED_DEFS_ID,
        "width": 0,
        "height": 0,
        "style": "position:absolute",
        "xmlns": SVG_NS,
    })
    build_shared_resources(element("defs", None, svg))
    return to_string(svg)


def init_shared_defs(document=None):
    """Inject the shared definitions into ``document`` once.

    Args:
        document: Target HostDocument; the process-wide one when None.

    Returns:
        True if the fragment was injected, False if it was already there.
    """
    if document is None:
        document = get_host_document()
    if document.has_element(SHARED_DEFS_ID):
        return False
    document.append(build_shared_defs_markup())
    logger.debug("shared dice defs injected", extra={"event": "shared_defs_injected"})
    return True
