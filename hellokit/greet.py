"""Small command-line applications: greetings, a task list and a proxy command."""

import argparse
import sys

_PROXY_DEFAULT_ARGS = ("foo", "-bar", "-baz")
_HELP_FLAGS = ("-h", "-help", "--help")


def greet(argv=None) -> int:
    """Say hello to a friend."""
    parser = argparse.ArgumentParser(prog="greet", description="fight the loneliness!")
    parser.add_argument("-v", "--version", action="version", version="greet version 0.0.0")
    parser.add_argument("args", nargs="*")
    parser.parse_args(argv)
    print("Hello friend!")
    return 0


def hello(argv=None) -> int:
    """Greet the first argument (default Nefertiti) in English or Spanish."""
    parser = argparse.ArgumentParser(prog="hello")
    parser.add_argument("--lang", default="english", help="language for the greeting")
    parser.add_argument("names", nargs="*")
    args = parser.parse_args(argv)
    name = args.names[0] if args.names else "Nefertiti"
    if args.lang == "spanish":
        print("Hola", name)
    else:
        print("Hello", name)
    return 0


def _reporter(prefix: str):
    def report(args) -> None:
        print(prefix, args.args[0] if args.args else "")
    return report


def tasks(argv=None) -> int:
    """Manage a task list: add, complete and template commands."""
    parser = argparse.ArgumentParser(prog="tasks")
    commands = parser.add_subparsers(dest="command")
    for name, alias, usage, prefix in (
        ("add", "a", "add a task to the list", "added task: "),
        ("complete", "c", "complete a task on the list", "completed task: "),
    ):
        command = commands.add_parser(name, aliases=[alias], help=usage)
        command.add_argument("args", nargs="*")
        command.set_defaults(action=_reporter(prefix))
    template = commands.add_parser("template", aliases=["t"], help="options for task templates")
    template_commands = template.add_subparsers(dest="subcommand")
    for name, usage, prefix in (
        ("add", "add a new template", "new task template: "),
        ("remove", "remove an existing template", "removed task template: "),
    ):
        command = template_commands.add_parser(name, help=usage)
        command.add_argument("args", nargs="*")
        command.set_defaults(action=_reporter(prefix))

    args = parser.parse_args(argv)
    action = getattr(args, "action", None)
    if action is None:
        (template if args.command in ("template", "t") else parser).print_help()
        return 0
    action(args)
    return 0


class _ProxyCommand:
    def help(self) -> str:
        return "ProxyCommand help xxx"

    def synopsis(self) -> str:
        return "ProxyCommand Synopsis Text"

    def run(self, args) -> int:
        print("ProxyCommand Running ...")
        return 0


_PROXY_COMMANDS = {"foo": _ProxyCommand}


def _proxy_usage() -> str:
    lines = ["Usage: proxy [--version] [--help] <command> [<args>]", "", "Available commands are:"]
    width = max(len(name) for name in _PROXY_COMMANDS)
    for name, factory in sorted(_PROXY_COMMANDS.items()):
        lines.append(f"    {name.ljust(width)}    {factory().synopsis()}")
    return "\n".join(lines)


def proxy(argv=None) -> int:
    """Run a named subcommand; without argv the fixed arguments foo -bar -baz are used.

    Help goes to stderr; an unknown command returns 127.
    """
    args = list(_PROXY_DEFAULT_ARGS if argv is None else argv)
    name = args[0] if args and not args[0].startswith("-") else ""
    rest = args[1:] if name else args
    factory = _PROXY_COMMANDS.get(name)
    if any(flag in rest for flag in _HELP_FLAGS):
        print(factory().help() if factory else _proxy_usage(), file=sys.stderr)
        return 0
    if factory is None:
        print(_proxy_usage(), file=sys.stderr)
        return 127
    return factory().run(rest)


if __name__ == "__main__":
    sys.exit(greet())