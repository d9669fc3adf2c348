"""Markup text helpers shared by the shape renderers."""

import numbers
from xml.sax.saxutils import escape

# escape() always handles &, < and >
_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def format_number(value: float) -> str:
    """Format a number in its shortest round-trippable decimal form.

    Integral values print without a fractional part so that 20.0 renders
    as "20". Fractions are converted to float first; everything else uses
    str(), which for floats parses back to the same value.

    Args:
        value: Number to format

    Returns:
        Decimal text form of the value
    """
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Rational):
        value = float(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def escape_markup(text: str) -> str:
    """Escape text for use as element content or attribute value.

    Args:
        text: Arbitrary caller-supplied text

    Returns:
        Text with &, <, >, " and ' replaced by entity references
    """
    return escape(text, _QUOTE_ENTITIES)


def format_attributes(attrs: dict[str, str]) -> str:
    """Join attribute name/value pairs into element attribute text.

    Values are escaped; pairs keep their insertion order.

    Args:
        attrs: Attribute names mapped to already formatted values

    Returns:
        Text like 'x="1" y="2"'
    """
    return " ".join(f'{name}="{escape_markup(value)}"' for name, value in attrs.items())
