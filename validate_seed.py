#!/usr/bin/env python3
"""Validate fleet seed YAML files against the schema."""
import sys
from pathlib import Path

from rental import load_schema, validate_seed_file
from rental import config


def main(argv=None):
    """Validate the given seed files, or the configured fleet file."""
    schema = load_schema()
    paths = [Path(p) for p in (argv if argv is not None else sys.argv[1:])]
    if not paths:
        paths = [config.fleet_file]

    all_valid = True
    for filepath in paths:
        errors = validate_seed_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
