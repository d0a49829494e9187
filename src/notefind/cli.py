"""
CLI for Notefind.

Minimal CLI using stdlib argument handling for fast startup.
Subcommands are imported lazily to avoid startup overhead.

Usage:
    notefind                        # Interactive search (primary interface)
    notefind list                   # Print every note path
    notefind --help                 # Show help
"""

import sys


def print_help() -> None:
    """Print help message."""
    print("""notefind - incremental search over plain-text notes

Usage:
    notefind                      Search notes interactively

Commands:
    notefind list                 Print the path of every note

Options:
    notefind --help, -h           Show this help
    notefind --version, -v        Show version

Keys:
    type                          Narrow the matches
    backspace                     Delete the last character
    enter                         Edit the top match, or create a new note
    ctrl-c, ctrl-d                Quit

Notes are the .txt files under notes_dir, set in
~/.config/notefind/config.toml (default: the current directory):

    [notefind]
    notes_dir = "~/notes"

Enter opens $EDITOR.""")


def print_version() -> None:
    """Print version."""
    from notefind import __version__
    print(f"notefind {__version__}")


def print_usage_error(arg: str) -> None:
    print(f"Unknown argument: {arg}", file=sys.stderr)
    print("Usage: notefind [list | --help | --version]", file=sys.stderr)


def setup():
    """Load settings and start logging."""
    from notefind.config import configure_logging, load_settings

    settings = load_settings()
    configure_logging(settings.log_level)
    return settings


def cmd_list() -> int:
    """Print every note path in scan order."""
    from notefind.errors import NotefindError
    from notefind.notes import scan_notes

    try:
        settings = setup()
    except NotefindError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for path in scan_notes(settings.notes_dir):
        print(path)
    return 0


def cmd_search() -> int:
    """Run the interactive search, then hand the terminal to the editor."""
    from notefind.errors import NotefindError
    from notefind.notes import load_notes
    from notefind.render import Renderer
    from notefind.session import Session, get_editor, launch_editor, terminal_session
    from notefind.terminal import read_key_presses

    try:
        settings = setup()
        editor = get_editor()
        notes = load_notes(settings.notes_dir)

        with terminal_session() as (inp, output):
            session = Session(notes, settings.notes_dir, Renderer(output))
            target = session.run(read_key_presses(inp))

        if target is None:
            return 0

        launch_editor(editor, target)
    except NotefindError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def main() -> int:
    """Main entry point."""
    args = sys.argv[1:]

    if not args:
        return cmd_search()

    first_arg = args[0]

    if first_arg in ("--help", "-h", "help"):
        print_help()
        return 0

    if first_arg in ("--version", "-v", "version"):
        print_version()
        return 0

    if first_arg == "list":
        return cmd_list()

    print_usage_error(first_arg)
    return 2


if __name__ == "__main__":
    sys.exit(main())
