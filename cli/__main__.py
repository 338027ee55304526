"""Main CLI entry point for confmgr."""

import argparse
import sys

from confmgr.config import OptionType


def create_parser():
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="confmgr",
        description="confmgr - load and inspect key = value config files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-dir", type=str, default=None, help="Also write diagnostics to a session log file in this directory.")
    parser.add_argument("--pid", type=str, default=None, help="The process ID for log file naming.")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.required = True

    # show command
    show_parser = subparsers.add_parser("show", help="Print the merged option table")
    show_parser.add_argument("config", type=str, help="Path to the initial config file.")
    show_parser.add_argument(
        "--additional",
        type=str,
        nargs="*",
        default=[],
        help="Config files layered on top of the initial one, in order.",
    )

    # get command
    get_parser = subparsers.add_parser("get", help="Print one option as a typed value")
    get_parser.add_argument("config", type=str, help="Path to the config file.")
    get_parser.add_argument("name", type=str, help="Option name (case-sensitive).")
    get_parser.add_argument(
        "--type",
        type=str,
        default=OptionType.STRING.value,
        choices=[t.value for t in OptionType],
        help="Type to read the option as.",
    )
    get_parser.add_argument("--default", type=str, default=None, help="Value used when the option is missing or invalid.")
    get_parser.add_argument("--quiet", action="store_true", help="Do not log missing or bad values.")

    # keys command
    keys_parser = subparsers.add_parser("keys", help="List option names starting with a prefix")
    keys_parser.add_argument("config", type=str, help="Path to the config file.")
    keys_parser.add_argument("prefix", type=str, nargs="?", default="", help="Name prefix, e.g. 'Log.'.")

    # version command
    subparsers.add_parser("version", help="Show confmgr version information")

    return parser


def main(argv=None) -> int:
    """Main entry point for confmgr CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        from cli.commands import show_version

        show_version()
        return 0

    from confmgr.logging_manager import setup_loggers, shutdown_loggers

    setup_loggers(log_dir=args.log_dir, process_id=args.pid)
    try:
        if args.command == "show":
            from cli.commands import show_table

            return show_table(args.config, args.additional)

        elif args.command == "get":
            from cli.commands import get_value

            return get_value(args.config, args.name, args.type, args.default, args.quiet)

        elif args.command == "keys":
            from cli.commands import list_keys

            return list_keys(args.config, args.prefix)
    finally:
        shutdown_loggers()

    return 0


if __name__ == "__main__":
    sys.exit(main())
