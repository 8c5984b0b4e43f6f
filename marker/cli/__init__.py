"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click

    from marker.cli._create_app import _create_app
    from marker.utils.get_package_version import get_package_version

    if argv is None:
        argv = sys.argv[1:]

    if argv[:1] in (["--version"], ["-v"]):
        print(f"marker {get_package_version()}")
        return 0

    app = _create_app()
    try:
        result = app(argv, standalone_mode=False)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except click.exceptions.UsageError as e:
        click.echo(f"Usage error: {e.format_message()}", err=True)
        return 2
    except click.exceptions.Abort:
        return 130
    return result if isinstance(result, int) else 0
