"""
Prompt Builder layer for the Summarizer.

Exports the SYSTEM_PROMPT role text, the option enums and the prompt assemblers.
"""

from .options import SummaryFormat, SummaryTone, SummaryLength
from .prompt_builder import (
    SYSTEM_PROMPT,
    FORMAT_DIRECTIVES,
    TONE_DIRECTIVES,
    build_system_prompt,
    build_user_input,
    build_messages,
)

__all__ = [
    "SummaryFormat",
    "SummaryTone",
    "SummaryLength",
    "SYSTEM_PROMPT",
    "FORMAT_DIRECTIVES",
    "TONE_DIRECTIVES",
    "build_system_prompt",
    "build_user_input",
    "build_messages",
]
