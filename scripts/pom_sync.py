#!/usr/bin/env python3
"""Update a project's pom.xml from its resolved dependencies and licenses.

Usage:
    python pom_sync.py <project-dir> [--model project.json] [--scope GROUP=SCOPE[:optional]]
                       [--xml-declaration] [--reformat] [--dry-run]

The project model is read from <project-dir>/project.json unless --model is
given. The dependencies and licenses sections of <project-dir>/pom.xml are
regenerated; everything else in the file is kept.
"""

import sys

from pomsync.cli import main

if __name__ == "__main__":
    sys.exit(main())
