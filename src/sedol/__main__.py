"""Command-line interface for SEDOL tools.

Usage:
    python -m sedol clean VALUE...          # Strip invalid characters
    python -m sedol check-digit BODY...     # Append check digits to bodies
    python -m sedol validate VALUE...       # Validate SEDOLs
    python -m sedol normalize VALUE...      # Clean, validate and print canonical SEDOLs
    python -m sedol --help                  # Show help
"""

import sys
from typing import Optional


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if not argv or argv[0] in ("-h", "--help"):
        print(__doc__)
        print("Commands:")
        print("  clean        Strip separators, whitespace and invalid characters")
        print("  check-digit  Calculate the check digit of 6-character bodies")
        print("  validate     Validate SEDOLs (length, characters, check digit)")
        print("  normalize    Clean and validate, printing the canonical SEDOL")
        print()
        print("Run 'python -m sedol <command> --help' for command-specific help.")
        return 0

    command, args = argv[0], argv[1:]

    if command == "clean":
        from .cli import clean_main

        return clean_main(args)
    elif command == "check-digit":
        from .cli import check_digit_main

        return check_digit_main(args)
    elif command == "validate":
        from .cli import validate_main

        return validate_main(args)
    elif command == "normalize":
        from .cli import normalize_main

        return normalize_main(args)
    else:
        print(f"Unknown command: {command}")
        print("Run 'python -m sedol --help' for available commands.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
