"""Synchronize a Maven pom.xml with a project's dependencies and licenses."""

from .errors import (
    InvalidTargetError,
    MalformedDocumentError,
    PomSyncError,
    ProjectModelError,
    SerializationError,
)
from .mapping import DEFAULT_GROUP_TO_SCOPE, ScopeOptions, resolve_scope
from .pom_document import PomDocument, load_document
from .pom_models import Dependency, ExclusionRef, LicenseRef, ProjectModel
from .pom_updater import POMUpdater, update_pom
from .pom_writer import render
from .project_loader import load_project_model
from .settings import POMSettings, SerializationPolicy

__all__ = [
    "DEFAULT_GROUP_TO_SCOPE",
    "Dependency",
    "ExclusionRef",
    "InvalidTargetError",
    "LicenseRef",
    "MalformedDocumentError",
    "POMSettings",
    "POMUpdater",
    "PomDocument",
    "PomSyncError",
    "ProjectModel",
    "ProjectModelError",
    "ScopeOptions",
    "SerializationError",
    "SerializationPolicy",
    "load_document",
    "load_project_model",
    "render",
    "resolve_scope",
    "update_pom",
]
