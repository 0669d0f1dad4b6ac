"""
tasklist - single-screen task list
"""

from tasklist.cli.app import app


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
