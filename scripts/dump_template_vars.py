#!/usr/bin/env python3
"""Dump the variables of a YAML or JSON file as an HTML inspector tree.

Usage:
    python scripts/dump_template_vars.py vars.yaml
    python scripts/dump_template_vars.py vars.json --maxdepth 5 > dump.html

The file must contain a mapping; each top-level key is rendered as a
template variable.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tplvars.inspector.invocation import inspect_variables
from tplvars.inspector.schemas import InspectorOptions

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def load_variables(path: Path) -> dict:
    """Load a mapping from a .json file, or YAML for anything else."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def main():
    parser = argparse.ArgumentParser(
        description="Render template variables from a YAML/JSON file as HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "file",
        type=Path,
        help="YAML or JSON file holding a mapping of variables",
    )
    parser.add_argument(
        "--maxdepth",
        help="Maximum recursion depth (1-50, default: 10)",
    )
    parser.add_argument(
        "--style",
        help="Custom CSS style for the output container",
    )
    args = parser.parse_args()

    if not args.file.exists():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        sys.exit(1)

    try:
        variables = load_variables(args.file)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        print(f"Error: Failed to parse {args.file}: {e}", file=sys.stderr)
        sys.exit(1)
    if variables is None:
        variables = {}
    if not isinstance(variables, dict):
        print(f"Error: {args.file} must contain a mapping, got {type(variables).__name__}", file=sys.stderr)
        sys.exit(1)

    options = InspectorOptions(max_depth=args.maxdepth, style=args.style)
    logger.info(f"Rendering {len(variables)} variables from {args.file}")
    print(inspect_variables(variables, options))


if __name__ == "__main__":
    main()
