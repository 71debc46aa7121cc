# boilr/config/wizard.py
"""Interactive first-run setup: pick a provider, enter its API key."""

import logging
from collections.abc import Callable
from pathlib import Path

import typer

from .loader import config_exists, read_config, write_config
from .schema import BoilrConfig, Provider

logger = logging.getLogger(__name__)

PROVIDER_CHOICES: list[tuple[str, Provider]] = [
    ("Gemini (Google)", Provider.GEMINI),
    ("OpenAI (GPT)", Provider.OPENAI),
    ("Anthropic (Claude)", Provider.ANTHROPIC),
]


def _prompt_provider() -> Provider:
    typer.echo("Which LLM provider will you be using?")
    for i, (label, _) in enumerate(PROVIDER_CHOICES, 1):
        typer.echo(f"  {i}. {label}")

    while True:
        answer = typer.prompt("Select a provider", default="1").strip().lower()
        if answer.isdigit() and 1 <= int(answer) <= len(PROVIDER_CHOICES):
            return PROVIDER_CHOICES[int(answer) - 1][1]
        # also accept the provider name itself
        for _, provider in PROVIDER_CHOICES:
            if answer == provider.value:
                return provider
        typer.echo(f"Please enter a number between 1 and {len(PROVIDER_CHOICES)}.")


def _prompt_api_key(provider: Provider) -> str:
    while True:
        key = typer.prompt(provider.key_prompt, hide_input=True, default="", show_default=False)
        if key.strip():
            return key.strip()
        typer.echo("API key cannot be empty.")


def run_first_run_wizard(path: Path | None = None) -> BoilrConfig:
    """
    Ask for a provider and its key, save the config, and return it.

    Args:
        path: Config file location (defaults to get_config_path())

    Returns:
        The saved BoilrConfig
    """
    provider = _prompt_provider()
    api_key = _prompt_api_key(provider)

    config = BoilrConfig.for_provider(provider, api_key)
    saved_to = write_config(config, path)
    logger.info(f"First-run setup complete: provider={provider.value}, path={saved_to}")
    return config


def load_or_create_config(
    path: Path | None = None,
    on_first_run: Callable[[], None] | None = None,
) -> tuple[BoilrConfig, bool]:
    """
    Read the config, running the wizard first if none exists.

    Args:
        path: Config file location
        on_first_run: Called before the wizard starts (e.g. to print a greeting)

    Returns:
        (config, created) where created is True if the wizard ran
    """
    if config_exists(path):
        return read_config(path), False

    if on_first_run is not None:
        on_first_run()
    return run_first_run_wizard(path), True
