"""Project model data classes.

Pure data structures describing the already-resolved project metadata that
gets projected into a pom.xml. No behavior beyond coordinate parsing and no
imports from other pomsync modules.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ExclusionRef:
    """A transitive artifact removed from a dependency's graph.

    Attributes:
        group: Maven groupId of the excluded artifact.
        name: Maven artifactId of the excluded artifact.
    """
    group: str
    name: str

    @classmethod
    def parse(cls, spec: str) -> "ExclusionRef":
        """Build an exclusion from a ``group:name`` string.

        Raises:
            ValueError: If the string does not have exactly two non-empty parts.
        """
        parts = spec.strip().split(":")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Invalid exclusion '{spec}', expected group:name")
        return cls(group=parts[0], name=parts[1])


@dataclass
class Dependency:
    """A single dependency of the project.

    Attributes:
        group: Maven groupId (e.g. ``org.apache.commons``).
        name: Maven artifactId (e.g. ``commons-lang3``).
        version: Version string, written verbatim.
        dep_type: Artifact type, written as ``<type>``. Defaults to ``jar``.
        exclusions: Ordered list of ExclusionRef entries.
    """
    group: str
    name: str
    version: str
    dep_type: str = "jar"
    exclusions: list = field(default_factory=list)

    @classmethod
    def parse(cls, spec: str, exclusions: list = None) -> "Dependency":
        """Build a dependency from an artifact coordinate string.

        Accepted forms::

            group:name:version
            group:name:version:type
            group:project:name:version:type

        The five-part form uses ``name`` as the artifactId.

        Raises:
            ValueError: If the string has another number of parts or empty parts.
        """
        parts = spec.strip().split(":")
        if not all(parts):
            raise ValueError(f"Invalid artifact '{spec}', empty coordinate")
        if len(parts) == 3:
            group, name, version = parts
            dep_type = "jar"
        elif len(parts) == 4:
            group, name, version, dep_type = parts
        elif len(parts) == 5:
            group, _project, name, version, dep_type = parts
        else:
            raise ValueError(
                f"Invalid artifact '{spec}', expected group:name:version[:type]"
            )
        return cls(
            group=group,
            name=name,
            version=version,
            dep_type=dep_type,
            exclusions=list(exclusions or []),
        )


@dataclass
class LicenseRef:
    """A license the project is published under.

    Attributes:
        identifier: License identifier, written as the license ``<name>``.
        see_also: Reference URLs. Only the first one is written, as ``<url>``.
    """
    identifier: str
    see_also: list = field(default_factory=list)


@dataclass
class ProjectModel:
    """Resolved project metadata consumed by the POM updater.

    ``dependency_groups`` is a plain dict, so groups are visited in insertion
    order. That order is part of the generated file's layout.

    Attributes:
        group: Project groupId.
        name: Project artifactId.
        version: Project version. Any object; rendered with ``str()``.
        licenses: Ordered list of LicenseRef entries.
        dependency_groups: Group name → ordered list of Dependency entries.
    """
    group: str
    name: str
    version: Any
    licenses: list = field(default_factory=list)
    dependency_groups: dict = field(default_factory=dict)

    def all_dependencies(self) -> list:
        """Return ``(group_name, dependency)`` pairs in output order."""
        return [
            (group_name, dep)
            for group_name, deps in self.dependency_groups.items()
            for dep in deps
        ]
