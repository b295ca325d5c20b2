"""
Name Validator - Python Implementation

Checks the files in a folder against a canonical list of names, reports the
closest match for each file and optionally renames files to the canonical spelling.
"""

__version__ = "1.0.0"
__author__ = "Name Validator Team"
