"""
Package entry point.

Allows running the application via:

    python -m schedule_detail

This simply forwards execution to schedule_detail.cli.main().
"""

from schedule_detail.cli import main

if __name__ == "__main__":
    main()
