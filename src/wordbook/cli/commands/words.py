"""
Word commands: list, show, add, rm.
"""

import asyncio
import sys

from rich.prompt import Confirm

from wordbook.cli.session import open_session


def add_subparser(subparsers):
    # list
    list_p = subparsers.add_parser("list", help="List all words")
    list_p.add_argument("-d", "--definitions", action="store_true", help="Show a definition summary")
    list_p.set_defaults(func=words_list)

    # show
    show_p = subparsers.add_parser("show", help="Show the full stored definition of a word")
    show_p.add_argument("word_id", type=int, help="Word ID")
    show_p.set_defaults(func=words_show)

    # add
    add_p = subparsers.add_parser("add", help="Add a word (definition looked up unless given)")
    add_p.add_argument("word", help="Word to add")
    add_p.add_argument("--definition", help="Store this definition instead of looking one up")
    add_p.set_defaults(func=words_add)

    # rm
    rm_p = subparsers.add_parser("rm", help="Delete a word by ID")
    rm_p.add_argument("word_id", type=int, help="Word ID")
    rm_p.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")
    rm_p.set_defaults(func=words_rm)


def words_list(args):
    sys.exit(asyncio.run(_list(args)))


def words_show(args):
    sys.exit(asyncio.run(_show(args)))


def words_add(args):
    sys.exit(asyncio.run(_add(args)))


def words_rm(args):
    sys.exit(asyncio.run(_rm(args)))


async def _list(args) -> int:
    async with open_session(args) as s:
        state = await s.store.reload()
        return 1 if state.error else 0


async def _show(args) -> int:
    async with open_session(args) as s:
        s.presenter.quiet = True
        state = await s.store.reload()
        s.presenter.quiet = False

        if state.error:
            s.presenter.failure(f"Error loading words: {state.error}")
            return 1
        entry = state.find(args.word_id)
        if entry is None:
            s.presenter.failure(f"Word with ID {args.word_id} not found.")
            return 1
        s.presenter.show_entry(entry)
        return 0


async def _add(args) -> int:
    async with open_session(args) as s:
        result = await s.coordinator.submit_add(args.word, args.definition)
        if not result.success:
            s.presenter.failure(result.message)
            return 1
        s.presenter.success(f"Added: {args.word.strip()}")
        return 0


async def _rm(args) -> int:
    async with open_session(args) as s:
        if not args.yes:
            s.presenter.quiet = True
            state = await s.store.reload()
            s.presenter.quiet = False

            entry = state.find(args.word_id)
            label = f"'{entry.word}' (ID {entry.id})" if entry else f"word with ID {args.word_id}"
            if not Confirm.ask(f"Delete {label}?", console=s.presenter.console):
                s.presenter.console.print("Cancelled.")
                return 0

        result = await s.coordinator.submit_delete(args.word_id)
        if not result.success:
            s.presenter.failure(result.message)
            return 1
        s.presenter.success(f"Deleted: {args.word_id}")
        return 0
