"""Synchronizing a project's pom.xml with its project model.

``POMUpdater.update`` runs the whole pipeline: load (or create) the pom.xml,
clear and regenerate the ``<dependencies>`` and ``<licenses>`` sections, set
the project coordinates, call the optional hook, and rewrite the file.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Callable, Optional

from .mapping import format_optional, resolve_scope
from .pom_document import POM_FILE_NAME, PomDocument, load_document
from .pom_models import ProjectModel
from .pom_writer import render as render_document, write_document
from .settings import POMSettings

logger = logging.getLogger(__name__)

# Called with the <project> element after the generated sections are written.
PomHook = Callable[[ET.Element], None]


class POMUpdater:
    """Writes a ProjectModel into ``<project_dir>/pom.xml``.

    Attributes:
        project_dir: Directory holding the pom.xml.
        model: The project metadata to write.
        settings: Scope mapping and serialization policy.
    """

    def __init__(self, project_dir: Path, model: ProjectModel,
                 settings: Optional[POMSettings] = None):
        self.project_dir = Path(project_dir)
        self.model = model
        self.settings = settings or POMSettings()

    @property
    def pom_path(self) -> Path:
        return self.project_dir / POM_FILE_NAME

    def update(self, hook: Optional[PomHook] = None) -> Path:
        """Update the project's pom.xml from its dependencies and licenses.

        Args:
            hook: Optional callable invoked with the root ``<project>`` element
                after the generated sections are rebuilt and before the file
                is written. It may edit the tree freely.

        Returns:
            Path of the written pom.xml.

        Raises:
            InvalidTargetError: If the pom.xml path is a directory or cannot
                be read and written. Nothing is written.
            MalformedDocumentError: If the existing file is not well-formed.
            SerializationError: If the tree cannot be rendered. Nothing is written.
        """
        document = self.prepare(hook)
        text = write_document(self.pom_path, document, self.settings.serialization)
        logger.debug("New pom.xml is\n\n%s", text)
        logger.info("Update complete")
        return self.pom_path

    def render(self, hook: Optional[PomHook] = None) -> str:
        """Build the updated pom.xml text without writing it."""
        return render_document(self.prepare(hook), self.settings.serialization)

    def prepare(self, hook: Optional[PomHook] = None) -> PomDocument:
        """Load the pom.xml, regenerate its sections, and run the hook."""
        document = load_document(self.pom_path)
        if document.created:
            logger.info("Creating the project pom.xml file")
        else:
            logger.info("Updating the project pom.xml file")

        self.rewrite(document)

        if hook is not None:
            before = document.snapshot()
            hook(document.root)
            document.mark_added_since(before)
        return document

    def rewrite(self, document: PomDocument) -> None:
        """Regenerate the dependency, license, and coordinate elements in place."""
        root = document.root
        self._clear_section(document, "dependencies")
        self._clear_section(document, "licenses")

        self._write_dependencies(document, root)
        self._write_licenses(document, root)

        document.set_text(root, "groupId", self.model.group)
        document.set_text(root, "artifactId", self.model.name)
        document.set_text(root, "version", self.model.version)

    def _clear_section(self, document: PomDocument, name: str) -> None:
        section = document.find_child(document.root, name)
        if section is not None:
            document.remove_all_children(section)

    def _section(self, document: PomDocument, root: ET.Element, name: str) -> ET.Element:
        section = document.find_child(root, name)
        if section is None:
            section = document.append_child(root, name)
        return section

    def _write_dependencies(self, document: PomDocument, root: ET.Element) -> None:
        dependencies = self._section(document, root, "dependencies")
        group_to_scope = self.settings.group_to_scope

        for group_name, dep in self.model.all_dependencies():
            dependency = document.append_child(dependencies, "dependency")
            document.set_text(dependency, "groupId", dep.group)
            document.set_text(dependency, "artifactId", dep.name)
            document.set_text(dependency, "version", dep.version)
            document.set_text(dependency, "type", dep.dep_type)

            options = resolve_scope(group_name, group_to_scope)
            document.set_text(dependency, "scope", options.scope)
            document.set_text(dependency, "optional", format_optional(options.optional))

            if dep.exclusions:
                exclusions = document.append_child(dependency, "exclusions")
                for exclude in dep.exclusions:
                    exclusion = document.append_child(exclusions, "exclusion")
                    document.set_text(exclusion, "groupId", exclude.group)
                    document.set_text(exclusion, "artifactId", exclude.name)

    def _write_licenses(self, document: PomDocument, root: ET.Element) -> None:
        licenses = self._section(document, root, "licenses")
        for lic in self.model.licenses:
            license_el = document.append_child(licenses, "license")
            document.set_text(license_el, "name", lic.identifier)
            document.set_text(license_el, "url", lic.see_also[0] if lic.see_also else None)
            document.set_text(license_el, "distribution", "repo")


def update_pom(project_dir: Path, model: ProjectModel,
               settings: Optional[POMSettings] = None,
               hook: Optional[PomHook] = None) -> Path:
    """Update ``<project_dir>/pom.xml`` from ``model``. See ``POMUpdater.update``."""
    return POMUpdater(project_dir, model, settings).update(hook)
