"""Entry point for `python -m themeport`."""

import sys


def main():
    from themeport.app import run_cli
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
