"""Dependency group → Maven scope translation.

Pure mapping logic with no XML handling and no file I/O. All functions are
stateless; the mutable per-run mapping lives in ``settings.POMSettings``.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ScopeOptions:
    """The Maven ``<scope>`` and ``<optional>`` values for a dependency group."""
    scope: str
    optional: bool = False


# Dependency group → Maven scope/optional.
# Both test groups collapse into Maven's single "test" scope.
DEFAULT_GROUP_TO_SCOPE = {
    "compile": ScopeOptions("compile", False),
    "compile-optional": ScopeOptions("compile", True),
    "provided": ScopeOptions("provided", False),
    "runtime": ScopeOptions("runtime", False),
    "test-compile": ScopeOptions("test", False),
    "test-runtime": ScopeOptions("test", False),
}

OPTIONAL_SUFFIX = "-optional"


def default_scope(group_name: str) -> ScopeOptions:
    """Scope for a group with no explicit mapping.

    The group name is used verbatim as the scope, and the dependency is
    optional when the name ends with ``-optional``::

        custom-foo      → ScopeOptions("custom-foo", False)
        extra-optional  → ScopeOptions("extra-optional", True)
    """
    return ScopeOptions(group_name, group_name.endswith(OPTIONAL_SUFFIX))


def resolve_scope(group_name: str, group_to_scope: Optional[dict] = None) -> ScopeOptions:
    """Look up the scope for a dependency group.

    Args:
        group_name: Name of the dependency group (e.g. ``test-runtime``).
        group_to_scope: Group name → ScopeOptions mapping. Defaults to
            ``DEFAULT_GROUP_TO_SCOPE``.

    Returns:
        The mapped ScopeOptions, or ``default_scope(group_name)`` when the
        group has no entry.
    """
    mapping = DEFAULT_GROUP_TO_SCOPE if group_to_scope is None else group_to_scope
    options = mapping.get(group_name)
    if options is None:
        return default_scope(group_name)
    return options


def format_optional(optional: bool) -> str:
    """Render the optional flag the way Maven expects it (``true``/``false``)."""
    return "true" if optional else "false"


def parse_scope_option(value: str) -> tuple:
    """Parse a ``group=scope[:optional]`` override.

    Examples:
        "provided-extra=provided"           → ("provided-extra", ScopeOptions("provided", False))
        "compile-extra=compile:optional"    → ("compile-extra", ScopeOptions("compile", True))

    Raises:
        ValueError: If the group or scope is empty, or the suffix after the
            scope is anything other than ``optional``.
    """
    group, sep, rest = value.partition("=")
    group = group.strip()
    scope, _, flag = rest.partition(":")
    scope = scope.strip()
    if not sep or not group or not scope:
        raise ValueError(f"Invalid scope mapping '{value}', expected group=scope[:optional]")
    flag = flag.strip()
    if flag and flag != "optional":
        raise ValueError(f"Invalid scope flag '{flag}' in '{value}', only 'optional' is allowed")
    return group, ScopeOptions(scope, bool(flag))
