"""Click base classes shared by every datectl command.

``examples=`` attaches an eager ``--examples`` flag that prints usage
examples and exits, keeping ``--help`` short. ``signed=True`` lets a
negative count such as ``-30`` reach a positional argument instead of
being rejected as an unknown option.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds the ``--examples`` flag when examples text is given."""

    params: list[click.Parameter]

    def _init_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class DatectlCommand(_ExamplesMixin, click.Command):
    """A leaf command: ``--examples`` support and optional signed counts."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        signed: bool = False,
        **kwargs: Any,
    ) -> None:
        if signed:
            context_settings = dict(kwargs.get("context_settings") or {})
            context_settings["ignore_unknown_options"] = True
            kwargs["context_settings"] = context_settings
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class DatectlGroup(_ExamplesMixin, click.Group):
    """The root group. Subcommands default to :class:`DatectlCommand`."""

    command_class = DatectlCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
