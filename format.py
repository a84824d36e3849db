#!/usr/bin/env python3
"""
Formatting script for the project.
Runs black and isort, and optionally a linter.
"""


import argparse
import subprocess
import sys
from pathlib import Path

TARGETS = ["src/doublespairing", "tests", "format.py"]


def run_command(cmd, description):
    """Run a command and handle errors."""
    print(f"Running {description}...")
    try:
        result = subprocess.run(cmd, check=True, capture_output=True, text=True)
        print(f"{description} completed successfully")
        if result.stdout:
            print(result.stdout)
        return True
    except subprocess.CalledProcessError as e:
        print(f"{description} failed:")
        print(e.stderr)
        return False
    except FileNotFoundError:
        print(f"Command not found: {cmd[0]}")
        return False


def format_code(check_only=False, targets=TARGETS):
    """Format code using black and isort."""
    success = True

    black_cmd = ["black", *(["--check", "--diff"] if check_only else []), *targets]
    if not run_command(black_cmd, "Black formatting"):
        success = False

    isort_cmd = ["isort", *(["--check-only", "--diff"] if check_only else []), *targets]
    if not run_command(isort_cmd, "Import sorting"):
        success = False

    return success


def lint_code(targets=TARGETS):
    """Run ruff, falling back to flake8."""
    if run_command(["ruff", "check", *targets], "Ruff linting"):
        return True
    return run_command(["flake8", *targets], "Flake8 linting")


def main():
    parser = argparse.ArgumentParser(description="Format and lint Python code")
    parser.add_argument(
        "--check", action="store_true", help="Check formatting without making changes"
    )
    parser.add_argument(
        "--lint", action="store_true", help="Run linting in addition to formatting"
    )
    args = parser.parse_args()

    root = Path(__file__).parent.resolve()
    targets = [str(root / t) for t in TARGETS]

    format_success = format_code(check_only=args.check, targets=targets)
    lint_success = lint_code(targets=targets) if args.lint else True

    if format_success and lint_success:
        action = "checked" if args.check else "formatted"
        print(f"Code successfully {action}!")
        sys.exit(0)
    print("Some operations failed. Please review the output above.")
    sys.exit(1)


if __name__ == "__main__":
    main()
