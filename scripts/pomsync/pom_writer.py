"""Rendering the pom.xml tree back to text and writing it to disk."""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from .errors import SerializationError
from .pom_document import PomDocument
from .settings import SerializationPolicy

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
INDENT = "  "


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def _step(indent: str) -> str:
    # Tab-indented files keep using tabs
    return "\t" if indent.endswith("\t") else INDENT


def _child_indent(document: PomDocument, parent: ET.Element, children: list, indent: str) -> str:
    """Indentation for the children of ``parent``.

    Taken from the first parsed child that sits on its own line, so generated
    siblings line up with existing ones. Falls back to one step deeper than
    the parent: a tab under tab indentation, INDENT otherwise.
    """
    for i, child in enumerate(children):
        if document.is_generated(child):
            continue
        before = parent.text if i == 0 else children[i - 1].tail
        if before and "\n" in before and not before.strip():
            return before.rsplit("\n", 1)[1]
    return indent + _step(indent)


def _layout(document: PomDocument, parent: ET.Element, indent: str) -> None:
    children = list(parent)
    if not children:
        return
    child_indent = _child_indent(document, parent, children, indent)
    for i, child in enumerate(children):
        if i == 0:
            if document.is_generated(child) and _is_blank(parent.text):
                parent.text = "\n" + child_indent
        else:
            prev = children[i - 1]
            touches_generated = document.is_generated(child) or document.is_generated(prev)
            if touches_generated and _is_blank(prev.tail):
                prev.tail = "\n" + child_indent
        _layout(document, child, child_indent)

    last = children[-1]
    if document.is_generated(last) and _is_blank(last.tail):
        last.tail = "\n" + indent


def layout_generated(document: PomDocument) -> None:
    """Indent generated elements, leaving parsed whitespace alone.

    Every generated element goes on its own line, one INDENT deeper than its
    parent, and the parent's closing tag goes back to the parent's own
    indentation.
    """
    _layout(document, document.root, "")


def _tostring(root: ET.Element, namespace: Optional[str]) -> str:
    """Serialize with ``namespace`` as the default namespace.

    ElementTree only knows prefixes through its module-level namespace map, so
    the mapping is registered for this call and the previous map restored.
    """
    if not namespace:
        return ET.tostring(root, encoding="unicode")
    saved = dict(ET._namespace_map)
    try:
        ET.register_namespace("", namespace)
        return ET.tostring(root, encoding="unicode")
    finally:
        ET._namespace_map.clear()
        ET._namespace_map.update(saved)


def render(document: PomDocument, policy: Optional[SerializationPolicy] = None) -> str:
    """Render the document to pom.xml text.

    Namespaced documents use the POM namespace as the default namespace, so
    tags are written without prefixes. The result ends with a single newline.

    Raises:
        SerializationError: If ElementTree cannot render the tree, e.g. an
            element's text is not a string.
    """
    policy = policy or SerializationPolicy()
    root = document.root
    if policy.preserve_existing_whitespace:
        layout_generated(document)
    else:
        ET.indent(root, space=INDENT)
    root.tail = None

    try:
        text = _tostring(root, document.namespace)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Unable to render pom.xml: {exc}") from exc

    if policy.include_xml_declaration:
        text = f"{XML_DECLARATION}\n{text}"
    return text + "\n"


def write_document(path: Path, document: PomDocument,
                   policy: Optional[SerializationPolicy] = None) -> str:
    """Render the document and replace the whole content of ``path`` with it.

    The text is rendered before the file is opened, so a rendering failure
    leaves the file untouched. The write itself is not atomic.

    Returns:
        The text that was written.
    """
    text = render(document, policy)
    path.write_bytes(text.encode("utf-8"))
    return text
