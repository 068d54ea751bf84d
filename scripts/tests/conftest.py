"""Shared test fixtures for the pom.xml synchronization test suite."""

import textwrap
from pathlib import Path

import pytest

from pomsync.pom_models import Dependency, ExclusionRef, LicenseRef, ProjectModel


@pytest.fixture
def tmp_pom(tmp_path):
    """Factory fixture that writes a pom.xml to a temp directory and returns the path."""
    def _write(content: str) -> Path:
        pom = tmp_path / "pom.xml"
        pom.write_text(textwrap.dedent(content), encoding="utf-8")
        return pom
    return _write


@pytest.fixture
def simple_model():
    """One license and one compile dependency."""
    return ProjectModel(
        group="org.example",
        name="lib",
        version="1.0",
        licenses=[LicenseRef("ApacheV2_0")],
        dependency_groups={
            "compile": [Dependency("org.other", "util", "2.3", "jar")],
        },
    )


@pytest.fixture
def full_model():
    """A project using every default dependency group, plus exclusions."""
    return ProjectModel(
        group="org.savantbuild.test",
        name="pom-plugin-test",
        version="1.0",
        licenses=[
            LicenseRef("ApacheV2_0", ["https://www.apache.org/licenses/LICENSE-2.0"]),
        ],
        dependency_groups={
            "compile": [
                Dependency.parse("org.savantbuild.test:multiple-versions:1.0.0"),
                Dependency.parse("org.savantbuild.test:multiple-versions-different-dependencies:2.0.0"),
                Dependency.parse("org.savantbuild.test:exclusions:2.0.0", [
                    ExclusionRef.parse("org.savantbuild.test:excluded1"),
                    ExclusionRef.parse("org.savantbuild.test:excluded2"),
                ]),
            ],
            "runtime": [Dependency.parse("org.savantbuild.test:intermediate:3.0.0")],
            "compile-optional": [Dependency.parse("org.savantbuild.test:optional:4.0.0")],
            "provided": [Dependency.parse("org.savantbuild.test:provided:5.0.0")],
            "test-compile": [Dependency.parse("org.savantbuild.test:test-compile:6.0.0")],
            "test-runtime": [Dependency.parse("org.savantbuild.test:test-runtime:7.0.0")],
        },
    )
