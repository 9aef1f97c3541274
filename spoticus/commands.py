"""
Command registry for the chat bot.

The registry is an immutable keyword -> CommandSpec table built once at
startup. The ``help`` entry is synthesized from the registry's own contents,
so the help listing can never drift from the registered set.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Optional, Tuple

from spoticus.handlers import ListClustersHandler, handle_launch
from spoticus.models import CommandContext

HELP_KEYWORD = "help"

CommandHandler = Callable[[CommandContext], str]


class RegistryError(Exception):
    """Raised when the command table violates its invariants."""

    pass


@dataclass(frozen=True)
class CommandSpec:
    """A command's routing keyword, help metadata and handler."""

    keyword: str
    description: str
    usage: str
    handler: CommandHandler


class CommandRegistry:
    """
    Immutable mapping from keyword to CommandSpec.
    """
    def __init__(self, specs: Iterable[CommandSpec]):
        table = {}
        for spec in specs:
            if spec.keyword != spec.keyword.lower() or not spec.keyword.strip():
                raise RegistryError(f"Command keyword must be non-empty lowercase: {spec.keyword!r}")
            if spec.keyword == HELP_KEYWORD:
                raise RegistryError(f"'{HELP_KEYWORD}' is reserved and synthesized by the registry")
            if spec.keyword in table:
                raise RegistryError(f"Duplicate command keyword: {spec.keyword!r}")
            table[spec.keyword] = spec

        table[HELP_KEYWORD] = CommandSpec(
            keyword=HELP_KEYWORD,
            description="Show available commands and usage.",
            usage="`help`",
            handler=self._handle_help,
        )
        self._table = MappingProxyType(table)

    def lookup(self, keyword: str) -> Optional[CommandSpec]:
        """Return the spec registered under ``keyword`` (already lowercased)."""
        return self._table.get(keyword)

    def all_entries(self) -> Tuple[CommandSpec, ...]:
        """All specs in registration order, help last."""
        return tuple(self._table.values())

    @property
    def help(self) -> CommandSpec:
        return self._table[HELP_KEYWORD]

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._table

    def __len__(self) -> int:
        return len(self._table)

    def format_help(self) -> str:
        """Build the help listing for every registered command."""
        lines = ["📖 *Available commands:*\n"]
        for spec in self._table.values():
            lines.append(f"\n• *{spec.keyword}* - {spec.description}\n  _Usage:_ {spec.usage}\n")
        return "".join(lines)

    def _handle_help(self, ctx: CommandContext) -> str:
        return self.format_help()


def build_registry(fetcher_factory) -> CommandRegistry:
    """
    Assemble the default command table.

    :param fetcher_factory: Callable returning a connected BaseFetcher, used by ``list``.
    """
    return CommandRegistry([
        CommandSpec(
            keyword="launch",
            description="Launch a cluster with specified type and size.",
            usage="`launch <cluster_type> <size>`\nExample: `launch k8s large`",
            handler=handle_launch,
        ),
        CommandSpec(
            keyword="list",
            description="List all mapt clusters.",
            usage="`list`",
            handler=ListClustersHandler(fetcher_factory),
        ),
    ])

