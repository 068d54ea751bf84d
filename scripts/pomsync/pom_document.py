"""Loading, initializing, and editing the pom.xml document tree.

The document is a plain ElementTree whose text/tail whitespace is kept
exactly as parsed. ``PomDocument`` wraps the root element with a small,
namespace-aware editing API and remembers which elements it created, so the
writer can lay those out without touching the rest of the file.
"""

import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from .errors import InvalidTargetError, MalformedDocumentError

POM_FILE_NAME = "pom.xml"

# XML namespaces used by Maven POM files (POM model version 4.0.0).
POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
POM_SCHEMA_LOCATION = f"{POM_NAMESPACE} https://maven.apache.org/xsd/maven-4.0.0.xsd"


def namespace_of(elem: ET.Element) -> Optional[str]:
    """Return the namespace URI of an element's tag, or ``None`` if unqualified."""
    tag = elem.tag
    if isinstance(tag, str) and tag.startswith("{") and "}" in tag:
        return tag[1:tag.index("}")]
    return None


def local_name(elem: ET.Element) -> Optional[str]:
    """Return an element's tag without its namespace.

    Comments and processing instructions have no name and return ``None``.
    """
    tag = elem.tag
    if not isinstance(tag, str):
        return None
    return tag.split("}")[-1] if "}" in tag else tag


class PomDocument:
    """A mutable pom.xml tree.

    All names passed to the editing methods are local names (``groupId``,
    ``dependency``); they are qualified with the root element's namespace, so
    namespaced and plain POM files are edited the same way.

    Attributes:
        root: The ``<project>`` element.
        namespace: Namespace URI of the root element, or ``None``.
        created: ``True`` when the document was synthesized rather than parsed.
    """

    def __init__(self, root: ET.Element, created: bool = False):
        self.root = root
        self.namespace = namespace_of(root)
        self.created = created
        # id -> element; holding the element keeps its id from being reused
        self._generated = {}

    def qualify(self, name: str) -> str:
        """Return the fully qualified tag for a local name."""
        return f"{{{self.namespace}}}{name}" if self.namespace else name

    def find_child(self, parent: ET.Element, name: str) -> Optional[ET.Element]:
        """Return the first direct child of ``parent`` named ``name``, or ``None``."""
        tag = self.qualify(name)
        for child in parent:
            if child.tag == tag:
                return child
        return None

    def append_child(self, parent: ET.Element, name: str) -> ET.Element:
        """Append a new, empty child element to ``parent`` and return it."""
        child = ET.SubElement(parent, self.qualify(name))
        self._mark_generated(child)
        return child

    def set_text(self, parent: ET.Element, name: str, value) -> Optional[ET.Element]:
        """Set the text of the ``name`` child of ``parent``.

        The child is created when missing and overwritten when present. A
        ``None`` value is a no-op: an existing element and its text are left
        alone.

        Returns:
            The child element, or ``None`` if ``value`` was ``None``.
        """
        if value is None:
            return None
        node = self.find_child(parent, name)
        if node is None:
            node = self.append_child(parent, name)
        node.text = str(value)
        return node

    def remove_all_children(self, parent: ET.Element) -> None:
        """Remove every child of ``parent``, along with the whitespace before them."""
        del parent[:]
        parent.text = None

    def is_generated(self, elem: ET.Element) -> bool:
        """Whether ``elem`` was created during this run rather than parsed."""
        return self._generated.get(id(elem)) is elem

    def snapshot(self) -> dict:
        """Capture every element currently in the tree.

        Pass the result to ``mark_added_since`` after code outside this class
        has edited the tree with plain ElementTree calls.
        """
        return {id(elem): elem for elem in self.root.iter()}

    def mark_added_since(self, snapshot: dict) -> None:
        """Treat elements that are not in ``snapshot`` as generated."""
        for elem in self.root.iter():
            if snapshot.get(id(elem)) is not elem:
                self._mark_generated(elem)

    def _mark_generated(self, elem: ET.Element) -> None:
        self._generated[id(elem)] = elem


def validate_target(path: Path) -> None:
    """Check that ``path`` can be read and rewritten.

    A missing file is valid; it will be created.

    Raises:
        InvalidTargetError: If the path is a directory, or exists without
            both read and write permission.
    """
    if path.is_dir():
        raise InvalidTargetError(f"Maven {path} is a directory")
    if path.exists() and not os.access(path, os.R_OK | os.W_OK):
        raise InvalidTargetError(f"Maven {path} is not readable and writable")


def new_document() -> PomDocument:
    """Create an empty ``<project>`` carrying the Maven 4.0.0 namespace declarations."""
    root = ET.Element(
        f"{{{POM_NAMESPACE}}}project",
        {f"{{{XSI_NAMESPACE}}}schemaLocation": POM_SCHEMA_LOCATION},
    )
    return PomDocument(root, created=True)


def parse_document(text: str) -> PomDocument:
    """Parse pom.xml text, keeping whitespace, comments, and processing instructions.

    Raises:
        MalformedDocumentError: If the text is not well-formed XML.
    """
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True, insert_pis=True))
    try:
        parser.feed(text)
        root = parser.close()
    except ET.ParseError as exc:
        raise MalformedDocumentError(f"pom.xml is not well-formed XML: {exc}") from exc
    if local_name(root) != "project":
        raise MalformedDocumentError(f"pom.xml root element is <{local_name(root)}>, not <project>")
    return PomDocument(root)


def load_document(path: Path) -> PomDocument:
    """Load the pom.xml at ``path``, or start a new one if it does not exist.

    Nothing is written.

    Raises:
        InvalidTargetError: See ``validate_target``.
        MalformedDocumentError: If the file is not UTF-8 or not well-formed XML.
    """
    validate_target(path)
    if not path.exists():
        return new_document()

    data = path.read_bytes()
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MalformedDocumentError(f"{path} is not UTF-8 encoded: {exc}") from exc
    return parse_document(text)
