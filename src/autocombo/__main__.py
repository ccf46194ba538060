"""Entry point for autocombo CLI."""

import sys

NOUNS = {"tui", "query", "web"}


def main():
    from autocombo.cli import build_parser

    parser = build_parser()
    argv = sys.argv[1:]

    # No subcommand = TUI mode on the given catalog
    if argv and argv[0] not in NOUNS and argv[0] not in ("-h", "--help"):
        argv = ["tui", *argv]

    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
