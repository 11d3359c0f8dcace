#!/usr/bin/env python3
"""
Source-checkout entrypoint.

Allows validating plists without installing the package:
  python3 apple_bundle.py path/to/Info.plist
"""

import os
import sys

# Support running from a source checkout without installation by adding `src/`
# to sys.path.
_HERE = os.path.dirname(os.path.abspath(__file__))
_SRC = os.path.join(_HERE, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

# Make this module behave like a package shim when imported as `apple_bundle`.
# This avoids shadowing `src/apple_bundle/` during test/import usage.
__path__ = [os.path.join(_SRC, "apple_bundle")]


def main(argv: list[str] | None = None) -> int:
    from apple_bundle.cli import main as _main

    return _main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
