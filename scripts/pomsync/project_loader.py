"""Reading a ProjectModel from a JSON interchange file.

The host build tool resolves the project and dumps it as JSON; this module
turns that dump into pom_models objects. Expected layout::

    {
      "group": "org.example",
      "name": "lib",
      "version": "1.0",
      "licenses": ["ApacheV2_0", {"identifier": "MIT", "seeAlso": ["https://..."]}],
      "dependencies": {
        "compile": [
          "org.other:util:2.3",
          {"id": "org.other:core:1.1:jar", "exclusions": ["org.bad:thing"]}
        ]
      }
    }
"""

import json
from pathlib import Path

from .errors import ProjectModelError
from .pom_models import Dependency, ExclusionRef, LicenseRef, ProjectModel


def _parse_license(entry) -> LicenseRef:
    if isinstance(entry, str):
        return LicenseRef(identifier=entry)
    if isinstance(entry, dict) and isinstance(entry.get("identifier"), str):
        see_also = entry.get("seeAlso") or []
        if not isinstance(see_also, list):
            raise ProjectModelError(f"License seeAlso must be a list: {entry!r}")
        return LicenseRef(identifier=entry["identifier"], see_also=[str(url) for url in see_also])
    raise ProjectModelError(f"Invalid license entry: {entry!r}")


def _parse_dependency(entry) -> Dependency:
    try:
        if isinstance(entry, str):
            return Dependency.parse(entry)
        if isinstance(entry, dict) and isinstance(entry.get("id"), str):
            exclusions = entry.get("exclusions") or []
            if not isinstance(exclusions, list):
                raise ProjectModelError(f"Dependency exclusions must be a list: {entry!r}")
            exclusions = [ExclusionRef.parse(ex) for ex in exclusions]
            return Dependency.parse(entry["id"], exclusions)
    except (ValueError, AttributeError) as exc:
        raise ProjectModelError(f"Invalid dependency entry {entry!r}: {exc}") from exc
    raise ProjectModelError(f"Invalid dependency entry: {entry!r}")


def project_model_from_dict(data: dict) -> ProjectModel:
    """Build a ProjectModel from decoded JSON.

    Dependency groups keep the key order of the JSON object.

    Raises:
        ProjectModelError: If a required field is missing or has the wrong type.
    """
    if not isinstance(data, dict):
        raise ProjectModelError("Project model must be a JSON object")
    for key in ("group", "name", "version"):
        if not isinstance(data.get(key), str) or not data[key]:
            raise ProjectModelError(f"Project model is missing '{key}'")

    licenses = data.get("licenses") or []
    groups = data.get("dependencies") or {}
    if not isinstance(licenses, list):
        raise ProjectModelError("'licenses' must be a list")
    if not isinstance(groups, dict):
        raise ProjectModelError("'dependencies' must map group names to lists")

    dependency_groups = {}
    for group_name, entries in groups.items():
        if not isinstance(entries, list):
            raise ProjectModelError(f"Dependency group '{group_name}' must be a list")
        dependency_groups[group_name] = [_parse_dependency(e) for e in entries]

    return ProjectModel(
        group=data["group"],
        name=data["name"],
        version=data["version"],
        licenses=[_parse_license(lic) for lic in licenses],
        dependency_groups=dependency_groups,
    )


def load_project_model(path: Path) -> ProjectModel:
    """Read a ProjectModel from a JSON file.

    Raises:
        ProjectModelError: If the file is missing, is not JSON, or does not
            describe a valid project.
    """
    if not path.is_file():
        raise ProjectModelError(f"No project model found at {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ProjectModelError(f"{path} is not valid JSON: {exc}") from exc
    return project_model_from_dict(data)
