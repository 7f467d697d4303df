from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from click import Group

__all__ = ("add_render_command", "get_sqltrace_group")


def get_sqltrace_group() -> "Group":
    """Get the sqltrace CLI group.

    Raises:
        MissingDependencyError: If the `click` package is not installed.

    Returns:
        The sqltrace CLI group.
    """
    from sqltrace.exceptions import MissingDependencyError

    try:
        import rich_click as click
    except ImportError:
        try:
            import click  # type: ignore[no-redef]
        except ImportError as e:
            raise MissingDependencyError(package="click", install_package="cli") from e

    @click.group(name="sqltrace")
    @click.option("--log-level", help="Configure sqltrace logging at this level.", type=str, default=None)
    @click.option(
        "--log-file",
        help="Also write sqltrace log records, traced statements included, to this file as JSON lines.",
        type=click.Path(dir_okay=False, writable=True),
        default=None,
    )
    def sqltrace_group(log_level: Optional[str], log_file: Optional[str]) -> None:
        """sqltrace CLI commands."""
        from sqltrace.exceptions import ImproperConfigurationError
        from sqltrace.utils.logging import configure_logging

        if not log_level and not log_file:
            return
        try:
            configure_logging(level=log_level or "DEBUG", format_style="simple", log_to_file=log_file)
        except ImproperConfigurationError as e:
            raise click.BadParameter(str(e), param_hint="'--log-level'") from e

    return add_render_command(sqltrace_group)


def add_render_command(group: "Group") -> "Group":
    """Add the ``render`` command to ``group``.

    Args:
        group: The group to add the command to.

    Returns:
        The group with the command added.
    """
    try:
        import rich_click as click
    except ImportError:
        import click  # type: ignore[no-redef]

    def parse_named(values: Sequence[str]) -> "dict[str, str]":
        named: dict[str, str] = {}
        for item in values:
            name, sep, value = item.partition("=")
            name = name.strip().lstrip(":")
            if not sep or not name:
                msg = f"expected NAME=VALUE, got {item!r}"
                raise click.BadParameter(msg, param_hint="'-n' / '--named'")
            named[f":{name}"] = value
        return named

    @group.command(name="render", help="Render a parameterized statement with its values filled in.")
    @click.argument("sql", type=str)
    @click.option("-p", "--param", "params", multiple=True, help="Positional value, in placeholder order.")
    @click.option("-n", "--named", "named", multiple=True, help="Named value as NAME=VALUE for a :NAME marker.")
    @click.option("--max-length", type=int, default=None, help="Maximum characters shown per value.")
    @click.option("--force-string", is_flag=True, default=False, help="Quote every value as a string.")
    @click.option("--markup", is_flag=True, default=False, help="Emit markup output even on a console.")
    @click.option("--plain-slots", is_flag=True, default=False, help="Do not highlight placeholder slots.")
    @click.option(
        "--interactive/--no-interactive",
        default=None,
        help="Treat the output as a console (default: detect).",
    )
    def render_statement(  # pyright: ignore[reportUnusedFunction]
        sql: str,
        params: "tuple[str, ...]",
        named: "tuple[str, ...]",
        max_length: Optional[int],
        force_string: bool,
        markup: bool,
        plain_slots: bool,
        interactive: Optional[bool],
    ) -> None:
        """Render one statement to standard output."""
        from sqltrace.observability import DebugTraceLogger, TraceConfig

        bindings: dict[object, str] = dict(enumerate(params))
        bindings.update(parse_named(named))

        config = TraceConfig(
            force_string_binding=force_string, override_interactive_output=markup, highlight_slots=not plain_slots
        )
        if max_length is not None:
            config.max_value_length = max(0, max_length)

        detect = None if interactive is None else (lambda: interactive)
        DebugTraceLogger(config, detect_interactive=detect).log(sql, bindings)

    return group
