"""
Interactive shell over a single long-lived session.
"""

import asyncio
import shlex

from rich.prompt import Confirm, Prompt

from wordbook.cli.session import open_session

HELP = """\
Commands:
  list                   reload and show all words
  add <word>             add a word, looking up its definition
  define <word> <text>   add a word with the given definition
  show <id>              show the full definition of a word
  rm <id>                delete a word (asks first)
  help                   show this text
  quit                   leave the shell"""


def add_subparser(subparsers):
    parser = subparsers.add_parser("shell", help="Interactive wordbook shell")
    parser.add_argument("-d", "--definitions", action="store_true", help="Show a definition summary")
    parser.set_defaults(func=run)


def run(args):
    asyncio.run(_shell(args))


async def _shell(args):
    async with open_session(args) as s:
        console = s.presenter.console
        await s.store.reload()
        console.print("[dim]Type 'help' for commands.[/dim]")

        while True:
            try:
                line = Prompt.ask("[bold]wordbook[/bold]", console=console)
            except (EOFError, KeyboardInterrupt):
                break

            try:
                parts = shlex.split(line)
            except ValueError as e:
                s.presenter.failure(str(e))
                continue
            if not parts:
                continue

            cmd, rest = parts[0], parts[1:]
            if cmd in ("quit", "exit"):
                break
            elif cmd == "help":
                console.print(HELP)
            elif cmd == "list":
                await s.store.reload()
            elif cmd == "add":
                result = await s.coordinator.submit_add(" ".join(rest))
                _report(s, result, f"Added: {' '.join(rest)}")
            elif cmd == "define":
                if len(rest) < 2:
                    s.presenter.failure("Usage: define <word> <definition>")
                    continue
                result = await s.coordinator.submit_add(rest[0], " ".join(rest[1:]))
                _report(s, result, f"Added: {rest[0]}")
            elif cmd == "show":
                word_id = _parse_id(rest)
                if word_id is None:
                    s.presenter.failure("Usage: show <id>")
                    continue
                entry = s.store.state.find(word_id)
                if entry is None:
                    s.presenter.failure(f"Word with ID {word_id} not found. Try `list` to refresh.")
                    continue
                s.presenter.show_entry(entry)
            elif cmd == "rm":
                word_id = _parse_id(rest)
                if word_id is None:
                    s.presenter.failure("Usage: rm <id>")
                    continue
                entry = s.store.state.find(word_id)
                label = f"'{entry.word}' (ID {word_id})" if entry else f"word with ID {word_id}"
                if not Confirm.ask(f"Delete {label}?", console=console):
                    continue
                result = await s.coordinator.submit_delete(word_id)
                _report(s, result, f"Deleted: {word_id}")
            else:
                s.presenter.failure(f"Unknown command: {cmd}")


def _report(s, result, message):
    if result.success:
        s.presenter.success(message)
    else:
        s.presenter.failure(result.message)


def _parse_id(rest: list[str]) -> int | None:
    """The single integer argument of an id command, or None."""
    if len(rest) != 1:
        return None
    try:
        return int(rest[0])
    except ValueError:
        return None
