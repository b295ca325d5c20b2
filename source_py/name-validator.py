#!/usr/bin/env python3
"""
Name Validator - Python Implementation

Checks the files in a folder against a canonical list of names and
optionally renames them to the canonical spelling.
"""

import sys
from name_validator.cli import main

if __name__ == "__main__":
    sys.exit(main())
