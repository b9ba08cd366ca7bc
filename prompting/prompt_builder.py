"""
Prompt Builder Layer
====================

Assembles the instruction prompt and message exchange for the model backend.

Responsibilities:
- Defines the authoritative SYSTEM_PROMPT role text
- Maps every format and tone option to exactly one directive clause
- Composes the user message sent by the form (length target + text)
- Builds the two-message exchange [system, user]

Invariants:
- SYSTEM_PROMPT contains no format or tone directive of its own
- build_system_prompt() appends exactly one format clause and one tone clause
- User text is passed through unmodified
"""

from typing import List, Optional, Union

from inference import ChatMessage
from .options import (
    DEFAULT_FORMAT,
    DEFAULT_TONE,
    SummaryFormat,
    SummaryLength,
    SummaryTone,
)

# ── Role Contract ─────────────────────────────────────────────────────────────
SYSTEM_PROMPT = """You are a text summarization assistant. Your task is to create clear, concise summaries while maintaining the key points and meaning of the original text. Follow these guidelines:

- Maintain the main ideas and crucial details
- Use clear, straightforward language
- Keep the summary length as requested by the user
- Ensure the summary is coherent and flows well
- Preserve the tone of the original text where appropriate"""

# ── Directive Tables ──────────────────────────────────────────────────────────
FORMAT_DIRECTIVES = {
    SummaryFormat.PARAGRAPH: (
        "Format your response as a simple paragraph without any markdown or special formatting."
    ),
    SummaryFormat.BULLETS: (
        "Format your response as bullet points, one key point per line, each line starting with \"• \"."
    ),
    SummaryFormat.NUMBERED: (
        "Format your response as a numbered list, one key point per line, in order of importance."
    ),
    SummaryFormat.OUTLINE: (
        "Format your response as a hierarchical outline with main topics and indented subpoints."
    ),
}

TONE_DIRECTIVES = {
    SummaryTone.CASUAL: "Use a casual, conversational tone with everyday language.",
    SummaryTone.PROFESSIONAL: "Use a clear, professional tone suitable for business communication.",
    SummaryTone.ACADEMIC: "Use formal scholarly language appropriate for academic writing.",
}


def build_system_prompt(
    format: Optional[Union[SummaryFormat, str]] = None,
    tone: Optional[Union[SummaryTone, str]] = None,
) -> str:
    """
    Assemble the system instruction.

    Args:
        format: Summary layout; defaults to paragraph.
        tone:   Summary register; defaults to professional.

    Returns:
        SYSTEM_PROMPT followed by one format clause and one tone clause.

    Raises:
        ValueError: unknown format or tone value
    """
    fmt = SummaryFormat(format) if format is not None else DEFAULT_FORMAT
    tn = SummaryTone(tone) if tone is not None else DEFAULT_TONE

    return "\n\n".join([SYSTEM_PROMPT, FORMAT_DIRECTIVES[fmt], TONE_DIRECTIVES[tn]])


def build_user_input(text: str, target_length: Union[SummaryLength, int]) -> str:
    """Compose the user message the form submits for a given word target."""
    words = int(target_length)
    return f"Please summarize the following text in approximately {words} words:\n\n{text}"


def build_messages(
    user_input: str,
    format: Optional[Union[SummaryFormat, str]] = None,
    tone: Optional[Union[SummaryTone, str]] = None,
) -> List[ChatMessage]:
    """Two-message exchange: system instruction, then the user's text."""
    return [
        ChatMessage(role="system", content=build_system_prompt(format, tone)),
        ChatMessage(role="user", content=user_input),
    ]
