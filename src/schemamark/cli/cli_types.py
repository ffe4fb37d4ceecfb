# topmark:header:start
#
#   project      : SchemaMark
#   file         : cli_types.py
#   file_relpath : src/schemamark/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for SchemaMark.

- `EnumChoiceParam`: case-insensitive choice over an Enum's string values.
- `KeyedEnumParam`: like `EnumChoiceParam` for `KeyedStrEnum` types, also
  accepting member names and aliases (e.g. ``--format jsonld``).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar, cast

import click

from schemamark.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType

E = TypeVar("E", bound=Enum)
KS = TypeVar("KS", bound=KeyedStrEnum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum (case-insensitive)."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key: str = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_SCHEMAMARK_COMPLETE=bash_source schemamark)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [RuntimeCompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumParam({self.enum_cls.__name__})"


class KeyedEnumParam(EnumChoiceParam[KS]):
    """Choice over a `KeyedStrEnum`, honoring member names and aliases."""

    def convert(
        self,
        value: str | KS | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> KS | None:
        """Convert a key, name or alias to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: KS | None = self.enum_cls.parse(str(value))
        if member is None:
            self._fail_noreturn(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member
