# boilr/llm/prompts/__init__.py
"""
Prompt templates for the schema design calls.

generate_system / generate_user drive the first design from an app idea
({idea}); revise_system / revise_user carry the current schema
({schema_json}) and the user's change request ({request}).
"""

from pathlib import Path

PROMPT_DIR = Path(__file__).parent


def load_prompt(name: str) -> str:
    """Return the stripped text of <name>.txt; FileNotFoundError if there is none."""
    prompt_path = PROMPT_DIR / f"{name}.txt"
    if not prompt_path.is_file():
        raise FileNotFoundError(f"No schema prompt named {name!r} in {PROMPT_DIR}")
    return prompt_path.read_text(encoding="utf-8").strip()


def render_prompt(name: str, **values: str) -> str:
    """Fill a user template's placeholders. A missing value raises KeyError."""
    return load_prompt(name).format(**values)


__all__ = ["PROMPT_DIR", "load_prompt", "render_prompt"]
