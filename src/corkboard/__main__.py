"""Entry point for corkboard CLI."""

import sys

from corkboard.errors import CorkboardError


def main():
    from corkboard.cli import build_parser
    from corkboard.cli._common import config_from_args
    from corkboard.logs import setup_logging

    parser = build_parser()
    args = parser.parse_args()

    try:
        config = config_from_args(args)
    except CorkboardError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    # No subcommand = TUI mode
    if args.noun is None:
        from corkboard.ui import CorkboardApp

        setup_logging(config, console=False)
        app = CorkboardApp(config)
        app.run()
        sys.exit(app.return_code or 0)

    setup_logging(config)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
