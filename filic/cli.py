"""Command-line front door for filic.

Each subcommand is a thin layer over the entity handles: it builds a handle
for the given path, runs one operation, and prints the result. Library errors
become a ``filic: ...`` line on stderr and a non-zero exit status.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .directory import Directory
from .entity import Entity
from .errors import FilicError, TypeMismatchError
from .file import File
from .highlight import colorize_source, sanitize_terminal_text
from .tree import render_tree, resolve

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_TYPE_MISMATCH = 2


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _show_hidden(args: argparse.Namespace) -> bool:
    return bool(args.all) or config.load_show_hidden()


def _cmd_ls(args: argparse.Namespace) -> int:
    directory = Directory.at(args.path)
    if args.dirs:
        names = [child.name for child in directory.list_directories()]
    elif args.files:
        names = [child.name for child in directory.list_files()]
    else:
        names = directory.list()
    show_hidden = _show_hidden(args)
    for name in names:
        if not show_hidden and name.startswith("."):
            continue
        print(sanitize_terminal_text(name))
    return EXIT_OK


def _cmd_tree(args: argparse.Namespace) -> int:
    directory = Directory.at(args.path)
    if not directory.is_directory():
        raise TypeMismatchError(directory.path, expected="directory", actual="file")
    text = render_tree(directory, show_hidden=_show_hidden(args), max_depth=args.depth)
    sys.stdout.write(sanitize_terminal_text(text))
    return EXIT_OK


def _cmd_type(args: argparse.Namespace) -> int:
    entity = Entity(args.path)
    if not entity.exists():
        print("missing")
        return EXIT_OK
    print("directory" if isinstance(resolve(entity), Directory) else "file")
    return EXIT_OK


def _cmd_mkdir(args: argparse.Namespace) -> int:
    Directory.at(args.path).create()
    return EXIT_OK


def _cmd_touch(args: argparse.Namespace) -> int:
    File.at(args.path).create()
    return EXIT_OK


def _file_for_content(path: str) -> File:
    """Return a file handle, rejecting paths that are existing directories."""
    entity = Entity(path)
    parent = entity.open_parent()
    return parent.open_file(entity.name)


def _cmd_write(args: argparse.Namespace) -> int:
    target = _file_for_content(args.path)
    data = args.text.encode(config.load_encoding())
    if args.append:
        target.append(data)
    else:
        target.write(data)
    return EXIT_OK


def _cmd_cat(args: argparse.Namespace) -> int:
    target = _file_for_content(args.path)
    text = target.read_string(config.load_encoding())
    if not args.no_color and sys.stdout.isatty():
        style = args.style or config.load_style()
        sys.stdout.write(colorize_source(text, target.name, style))
    else:
        sys.stdout.write(sanitize_terminal_text(text))
    return EXIT_OK


def _on_off(value: str) -> bool:
    """argparse type for on/off switches."""
    lowered = value.strip().lower()
    if lowered in {"on", "true", "yes", "1"}:
        return True
    if lowered in {"off", "false", "no", "0"}:
        return False
    raise argparse.ArgumentTypeError(f"expected on or off, got {value!r}")


def _cmd_config(args: argparse.Namespace) -> int:
    """Update any given preferences, then print the effective values."""
    if args.show_hidden is not None:
        config.save_show_hidden(args.show_hidden)
    if args.style is not None:
        config.save_style(args.style)
    if args.encoding is not None:
        config.save_encoding(args.encoding)
    print(f"show_hidden = {'on' if config.load_show_hidden() else 'off'}")
    print(f"style = {config.load_style()}")
    print(f"encoding = {config.load_encoding()}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="filic", description="Inspect and create files and directories.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log filesystem mutations to stderr.")
    sub = parser.add_subparsers(dest="command", required=True)

    ls_parser = sub.add_parser("ls", help="List immediate children of a directory.")
    ls_parser.add_argument("path", nargs="?", default=".")
    kind = ls_parser.add_mutually_exclusive_group()
    kind.add_argument("--dirs", action="store_true", help="Only list directories.")
    kind.add_argument("--files", action="store_true", help="Only list files.")
    ls_parser.add_argument("-a", "--all", action="store_true", help="Include hidden entries.")
    ls_parser.set_defaults(handler=_cmd_ls)

    tree_parser = sub.add_parser("tree", help="Print a directory tree.")
    tree_parser.add_argument("path", nargs="?", default=".")
    tree_parser.add_argument("--depth", type=_nonnegative_int, default=None, help="Maximum depth to descend.")
    tree_parser.add_argument("-a", "--all", action="store_true", help="Include hidden entries.")
    tree_parser.set_defaults(handler=_cmd_tree)

    type_parser = sub.add_parser("type", help="Print directory, file, or missing.")
    type_parser.add_argument("path")
    type_parser.set_defaults(handler=_cmd_type)

    mkdir_parser = sub.add_parser("mkdir", help="Create a directory and its ancestors.")
    mkdir_parser.add_argument("path")
    mkdir_parser.set_defaults(handler=_cmd_mkdir)

    touch_parser = sub.add_parser("touch", help="Create an empty file and its ancestors.")
    touch_parser.add_argument("path")
    touch_parser.set_defaults(handler=_cmd_touch)

    write_parser = sub.add_parser("write", help="Replace or append file content.")
    write_parser.add_argument("path")
    write_parser.add_argument("text")
    write_parser.add_argument("--append", action="store_true", help="Append to an existing file instead.")
    write_parser.set_defaults(handler=_cmd_write)

    cat_parser = sub.add_parser("cat", help="Print file content.")
    cat_parser.add_argument("path")
    cat_parser.add_argument("--style", default=None, help="Pygments style name.")
    cat_parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    cat_parser.set_defaults(handler=_cmd_cat)

    config_parser = sub.add_parser("config", help="Show or update persisted preferences.")
    config_parser.add_argument("--show-hidden", type=_on_off, default=None, metavar="on|off")
    config_parser.add_argument("--style", default=None, help="Pygments style name for cat.")
    config_parser.add_argument("--encoding", default=None, help="Text encoding for cat and write.")
    config_parser.set_defaults(handler=_cmd_config, path=None)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse ``argv`` (default ``sys.argv[1:]``), run one command, return the exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("running %s on %s", args.command, args.path)
    try:
        return args.handler(args)
    except TypeMismatchError as exc:
        print(f"filic: {exc}", file=sys.stderr)
        return EXIT_TYPE_MISMATCH
    except (FilicError, OSError) as exc:
        print(f"filic: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
