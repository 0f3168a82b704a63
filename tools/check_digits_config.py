#!/usr/bin/env python3
"""
Fail-closed validator for digits config files (see src/core/digits/defaults.yaml).

This is intentionally lightweight and CI-friendly:
- checks schema/version and every known key
- rejects unknown keys, unknown integer types and unknown overflow policies
- prints the resolved configuration on success
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.core.digits.config import DEFAULT_CONFIG_PATH, load_config  # noqa: E402
from src.core.digits.errors import ConfigError  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Validate a digits config YAML file.")
    ap.add_argument("paths", nargs="*", type=Path, help=f"config files (default: {DEFAULT_CONFIG_PATH})")
    args = ap.parse_args(argv)

    paths = args.paths or [DEFAULT_CONFIG_PATH]
    rc = 0
    for path in paths:
        if not path.exists():
            print(f"missing config file: {path}", file=sys.stderr)
            return 2
        try:
            cfg = load_config(path)
        except ConfigError as exc:
            print(f"{path}: invalid: {exc}", file=sys.stderr)
            rc = 1
            continue
        print(
            f"{path}: ok (default_int_type={cfg.default_int_type}, "
            f"overflow={cfg.overflow.value}, pointer_width={cfg.pointer_width})"
        )
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
