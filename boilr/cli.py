# boilr/cli.py
"""
CLI interface for boilr.

Thin presentation layer: loads (or creates) the config, then hands the
conversation to RevisionSession.
"""

import asyncio
import logging
from pathlib import Path

import typer

from boilr import __version__
from boilr.config import BoilrConfig, get_config_path, load_or_create_config, run_first_run_wizard
from boilr.errors import BoilrError
from boilr.logging_config import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="boilr",
    help="AI-powered CLI tool that generates production-ready, domain-aware SaaS boilerplate.",
    add_completion=False,
)


def _run(coro):
    """Run async function from sync CLI context."""
    return asyncio.run(coro)


def _fail(message: str) -> None:
    typer.echo(typer.style(message, fg=typer.colors.RED), err=True)
    raise typer.Exit(1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"boilr {__version__}")
        raise typer.Exit()


def _greet_first_run() -> None:
    typer.echo(typer.style("Welcome to Boilr! 🪄", fg=typer.colors.BLUE))
    typer.echo(
        typer.style(
            "I see this is your first time. Let's set up your AI provider.",
            fg=typer.colors.BLUE,
        )
    )


async def _design(config: BoilrConfig):
    """Run the revision loop against the configured provider."""
    from rich.console import Console
    from rich.status import Status

    from boilr.llm import SchemaDesigner
    from boilr.session import RevisionSession

    console = Console(stderr=True)
    designer = SchemaDesigner(config)
    session = RevisionSession(
        designer=designer,
        ask=lambda text: typer.prompt(text),
        show=typer.echo,
        busy=lambda message: Status(f"[dim]{message}[/dim]", console=console, spinner="dots"),
    )
    try:
        return await session.run()
    finally:
        await designer.close()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show progress logs on stderr"),
    log_json: bool = typer.Option(False, "--log-json", help="Emit logs as JSON lines"),
    save: Path = typer.Option(None, "--save", help="Write the approved schema JSON to this file"),
    version: bool = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Describe your app idea and design its database schema with an LLM."""
    configure_logging(logging.INFO if verbose else logging.WARNING, json_format=log_json)

    if ctx.invoked_subcommand is not None:
        return

    try:
        config, created = load_or_create_config(on_first_run=_greet_first_run)
        if created:
            typer.echo(typer.style("✓ Configuration saved!", fg=typer.colors.GREEN))
            typer.echo(typer.style("Now, let's build your new SaaS project.", fg=typer.colors.BLUE))
        else:
            typer.echo(
                typer.style(
                    f"Welcome back to Boilr! 🪄 (Using {config.llm_provider.display_name} "
                    f"from {get_config_path()})",
                    fg=typer.colors.BLUE,
                )
            )

        design = _run(_design(config))

        if save is not None:
            save.parent.mkdir(parents=True, exist_ok=True)
            save.write_text(design.schema.to_json() + "\n", encoding="utf-8")
    except (KeyboardInterrupt, typer.Abort):
        typer.echo("\nCancelled.", err=True)
        raise typer.Exit(130)
    except (BoilrError, OSError) as e:
        logger.debug("Fatal error", exc_info=True)
        _fail(f"Error: {e}")

    names = ", ".join(design.schema.model_names())
    typer.echo(
        typer.style(f"✓ Schema approved for '{design.project_name}'", fg=typer.colors.GREEN)
        + f"  ({len(design.schema.models)} models: {names})"
    )
    if save is not None:
        typer.echo(f"Saved: {save}")


@app.command()
def config():
    """Update your AI provider configuration."""
    typer.echo(typer.style("Let's update your AI provider configuration.", fg=typer.colors.BLUE))
    try:
        run_first_run_wizard()
    except typer.Abort:
        typer.echo("\nCancelled.", err=True)
        raise typer.Exit(130)
    except (BoilrError, OSError) as e:
        _fail(f"Error updating configuration: {e}")

    typer.echo(typer.style("✓ Configuration saved!", fg=typer.colors.GREEN))


if __name__ == "__main__":
    app()
