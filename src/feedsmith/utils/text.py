"""Text cleanup for scraped page content."""

import re

# Characters XML 1.0 does not allow; lxml refuses them when serializing
_XML_INVALID = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def strip_xml_invalid(text: str) -> str:
    """Remove characters that cannot appear in an XML 1.0 document."""
    return _XML_INVALID.sub("", text)
