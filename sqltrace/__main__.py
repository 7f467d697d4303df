from sqltrace.cli import get_sqltrace_group


def run_cli() -> None:  # pragma: no cover
    """sqltrace CLI."""
    get_sqltrace_group()()


if __name__ == "__main__":  # pragma: no cover
    run_cli()
