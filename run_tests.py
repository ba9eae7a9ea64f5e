#!/usr/bin/env python3
"""
Test runner script for PyMisrHR.

Shortcuts for the test suites. Full-block resampling tests (marked slow)
compile Taichi kernels and run them on 512 x 2048 grids; skip them with --fast.
"""
import sys
import subprocess
import argparse

SUITES = {
    "imports": ("tests/test_imports.py", "Import tests"),
    "unit": ("tests/unit/", "Unit tests"),
    "integration": ("tests/integration/", "Integration tests"),
}


def run_command(cmd, description=None):
    """Run a command and return True on success."""
    if description:
        print(f"→ {description}")
    return subprocess.run(cmd, shell=True).returncode == 0


def main():
    parser = argparse.ArgumentParser(
        description="PyMisrHR test runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py --imports          # Import tests
  python run_tests.py --unit             # Unit tests
  python run_tests.py --integration      # Integration tests
  python run_tests.py --all              # Every suite, one after the other
  python run_tests.py --fast             # Everything except full-block tests
  python run_tests.py -k mask            # Forward a -k expression to pytest
        """
    )
    for name in SUITES:
        parser.add_argument(f'--{name}', action='store_true',
                            help=f'Run {name} tests only')
    parser.add_argument('--all', action='store_true', help='Run all suites')
    parser.add_argument('--fast', action='store_true',
                        help='Exclude slow (full-block) tests')
    parser.add_argument('-k', dest='keyword', default=None,
                        help='Only run tests matching the expression')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')
    parser.add_argument('--coverage', action='store_true',
                        help='Run with coverage report')

    args = parser.parse_args()

    base_cmd = "PYTHONPATH=. python -m pytest"
    base_cmd += " -v" if args.verbose else " -q"
    if args.coverage:
        base_cmd += " --cov=pymisrhr --cov-report=html --cov-report=term"
    if args.fast:
        base_cmd += " -m 'not slow'"
    if args.keyword:
        base_cmd += f" -k '{args.keyword}'"
    base_cmd += " --disable-warnings"

    selected = [name for name in SUITES if getattr(args, name)]
    if args.all:
        selected = list(SUITES)

    if selected:
        success = True
        for name in selected:
            path, description = SUITES[name]
            if not run_command(f"{base_cmd} {path}", description):
                success = False
    else:
        paths = " ".join(SUITES[name][0] for name in ("imports", "unit"))
        success = run_command(f"{base_cmd} {paths}",
                              "Running basic test suite (imports + unit tests)")

    if success:
        print("\n✅ All tests passed!")
        return 0
    print("\n❌ Some tests failed!")
    return 1


if __name__ == '__main__':
    sys.exit(main())
