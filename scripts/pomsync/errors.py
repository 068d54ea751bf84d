"""Exceptions raised while synchronizing a pom.xml file.

Every failure aborts the whole update; callers decide whether to retry,
stop the build, or report to the user.
"""


class PomSyncError(Exception):
    """Base class for all pomsync errors."""


class InvalidTargetError(PomSyncError):
    """The pom.xml path is a directory, or is not both readable and writable."""


class MalformedDocumentError(PomSyncError):
    """The existing pom.xml is not well-formed UTF-8 XML."""


class SerializationError(PomSyncError):
    """The document tree could not be rendered to XML text."""


class ProjectModelError(PomSyncError):
    """A project-model interchange file is missing fields or is not valid JSON."""
