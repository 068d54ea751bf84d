"""Settings that control how a project model is written into a pom.xml."""

from dataclasses import dataclass, field

from .mapping import DEFAULT_GROUP_TO_SCOPE, ScopeOptions


@dataclass
class SerializationPolicy:
    """How the document tree is rendered back to text.

    Attributes:
        include_xml_declaration: Start the file with an XML declaration line.
            Off by default; older tooling wrote it.
        preserve_existing_whitespace: Keep the layout of a loaded document and
            indent only generated elements. When off, the whole document is
            re-indented with two spaces per level.
    """
    include_xml_declaration: bool = False
    preserve_existing_whitespace: bool = True


def _default_group_to_scope() -> dict:
    return dict(DEFAULT_GROUP_TO_SCOPE)


@dataclass
class POMSettings:
    """Per-project POM settings.

    Each instance owns its own copy of the default group mapping, so edits made
    before an update never leak into other projects.

    Attributes:
        group_to_scope: Dependency group name → ScopeOptions.
        serialization: Rendering policy for the written file.
    """
    group_to_scope: dict = field(default_factory=_default_group_to_scope)
    serialization: SerializationPolicy = field(default_factory=SerializationPolicy)

    def map_group(self, group_name: str, scope: str, optional: bool = False) -> None:
        """Map a dependency group to a Maven scope, replacing any existing entry."""
        self.group_to_scope[group_name] = ScopeOptions(scope, optional)
