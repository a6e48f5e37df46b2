"""Statement parser for the memdb command language.

The language has exactly four fixed statement shapes and no nesting, so
each shape is recognized by one regular expression matched against the
whole statement:

    create table <name> (<col> <type>, ...)
    insert into <name> (<col>, ...) values (<value>, ...)
    select <col>, ... from <name> [where <col> = <value>]
    delete from <name> [where <col> = <value>]

Keywords are lowercase and literal. Table names are lowercase letters.
Everything inside parentheses or after `where` is captured verbatim and
left for the table engine to split.

Example:
    >>> parser = StatementParser()
    >>> parser.parse("delete from author where id = 2")
    Command(kind=<CommandKind.DELETE: 'delete'>, operands=('author', 'id = 2'))
"""

from __future__ import annotations

import re

from memdb.domain.value_objects import Command, CommandKind

# Tried in declaration order; the first full match wins.
_PATTERNS: tuple[tuple[CommandKind, re.Pattern[str]], ...] = (
    (CommandKind.CREATE_TABLE, re.compile(r"create table ([a-z]+) \((.+)\)")),
    (CommandKind.INSERT, re.compile(r"insert into ([a-z]+) \((.+)\) values \((.+)\)")),
    (CommandKind.SELECT, re.compile(r"select (.+) from ([a-z]+)(?: where (.+))?")),
    (CommandKind.DELETE, re.compile(r"delete from ([a-z]+)(?: where (.+))?")),
)


class StatementParser:
    """Pattern-based parser producing Command descriptors."""

    def parse(self, statement: str) -> Command | None:
        """Match a statement against the recognized shapes.

        Args:
            statement: Raw statement text (a single line).

        Returns:
            The Command for the first matching shape, or None if no
            shape matches. Unmatched input is not an error here.
        """
        for kind, pattern in _PATTERNS:
            match = pattern.fullmatch(statement)
            if match is not None:
                return Command(kind=kind, operands=match.groups())
        return None
