"""Direct entry point for the slidespace command.

This file is used as the entry point for the slidespace command line tool.
It imports and executes the main function from __main__.py.
"""

import sys


def main() -> int:
    """Entry point for slidespace command.

    Returns:
        Exit code
    """
    from slidespace.__main__ import main as _main
    return _main()


if __name__ == "__main__":
    sys.exit(main())
