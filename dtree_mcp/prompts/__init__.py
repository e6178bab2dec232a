"""Initializes the prompts module and aggregates prompts from all submodules."""

from .system import get_prompts as get_system_prompts


def get_prompts() -> dict[str, str]:
    """
    Returns a dictionary of all available prompts from all prompt files,
    plus the assembled agent system prompt.
    """
    prompts = {}
    prompts.update(get_system_prompts())
    prompts["agent-system-prompt"] = prompts["base"] + prompts["reset-instructions"]
    return prompts
