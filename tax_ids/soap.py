"""Helpers shared by the SOAP registries (BFS and VIES)."""

from collections.abc import Callable, Collection

from lxml import etree

from .errors import XmlParsingError


def _keep(text: str) -> str | None:
    return text


def flatten_xml(
    body: bytes,
    *,
    exclude: Collection[str] = (),
    convert: Callable[[str], str | None] = _keep,
) -> dict[str, str | None]:
    """Flatten the text of every element into a ``{local tag name: text}`` map.

    Namespaces are dropped. Elements without text, or with whitespace only
    (wrappers around other elements), are skipped, as are the tags listed in
    ``exclude``. When a tag appears more than once the last one wins.

    Args:
        body: The raw XML document.
        exclude: Local tag names to leave out.
        convert: Applied to every text before it is stored.

    Returns:
        The flattened map.

    Raises:
        XmlParsingError: ``body`` is not well-formed XML.

    Examples:
        >>> flatten_xml(b'''<s:Envelope xmlns:s="http://schemas.xmlsoap.org/soap/envelope/">
        ...   <s:Body><result>true</result></s:Body>
        ... </s:Envelope>''')
        {'result': 'true'}

        >>> flatten_xml(b"<a><b>---</b><c>x</c></a>", exclude={"c"},
        ...             convert=lambda text: None if text == "---" else text)
        {'b': None}

    """
    try:
        root = etree.fromstring(
            body.strip(), parser=etree.XMLParser(resolve_entities=False, no_network=True)
        )
    except (etree.XMLSyntaxError, ValueError) as error:
        raise XmlParsingError(f"Invalid XML: {error}") from error

    flattened: dict[str, str | None] = {}
    for element in root.iter(etree.Element):
        tag = etree.QName(element).localname
        if tag in exclude or element.text is None or not element.text.strip():
            continue
        flattened[tag] = convert(element.text)
    return flattened
