"""Small ElementTree helpers for building SVG markup."""

import xml.etree.ElementTree as ET

SVG_NS = "http://www.w3.org/2000/svg"


def fmt(value):
    """Format an attribute value; numbers get at most three decimals."""
    if isinstance(value, str):
        return value
    text = f"{float(value):.3f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


def element(tag, attrs=None, parent=None):
    """Create an element (optionally under ``parent``) with formatted attrs.

    Attributes whose value is None are skipped, so optional styling can be
    passed straight through.
    """
    attrib = {k: fmt(v) for k, v in (attrs or {}).items() if v is not None}
    if parent is None:
        return ET.Element(tag, attrib)
    return ET.SubElement(parent, tag, attrib)


def gradient(tag, gid, stops, parent=None, **coords):
    """Build a gradient from ``(offset, color, opacity)`` stop tuples."""
    grad = element(tag, dict(id=gid, **coords), parent)
    for offset, color, opacity in stops:
        element("stop", {
            "offset": offset,
            "stop-color": color,
            "stop-opacity": opacity,
        }, grad)
    return grad


def rounded_rect(x, y, size, radius, parent=None, **attrs):
    """Square ``rect`` with equal corner radius; extra attrs use SVG names."""
    base = {"x": x, "y": y, "width": size, "height": size, "rx": radius}
    base.update({k.replace("_", "-"): v for k, v in attrs.items()})
    return element("rect", base, parent)


def to_string(node):
    return ET.tostring(node, encoding="unicode")
