"""
`python -m apple_bundle` entrypoint.

This is mainly for convenience; the installed console script `apple-bundle` calls
the same `apple_bundle.cli:main`.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
