# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

_ALIAS_SEPARATOR = re.compile(r"\s*,\s*")

SUB_APP_ORDER = ["task, t", "view, v", "config, c"]


def split_aliases(registered_name: str) -> list[str]:
    """Split a registered name such as "add, a" into ["add", "a"]."""
    return _ALIAS_SEPARATOR.split(registered_name.strip())


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Group whose commands are registered as "name, alias, ..." and can be
    invoked by any of those words.
    """

    def resolve_alias(self, word: str) -> str:
        for registered_name in self.commands:
            if word in split_aliases(registered_name):
                return registered_name
        return word

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        registered_name = name or cmd.name or ""
        # A bare alias never shadows an already registered command
        covered_by = self.resolve_alias(registered_name)
        if covered_by != registered_name and covered_by in self.commands:
            return
        super().add_command(cmd, name)


class OrderedAliasedGroup(AliasedTyperGroup):
    """Root group listing the sub-apps in workflow order."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        known = [name for name in SUB_APP_ORDER if name in self.commands]
        rest = [name for name in self.commands if name not in SUB_APP_ORDER]
        return known + rest


class AlphabeticalAliasedGroup(AliasedTyperGroup):
    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(super().list_commands(ctx))
