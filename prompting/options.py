"""User-selectable summary options."""

from enum import Enum


class SummaryFormat(str, Enum):
    """Output layout of the summary."""

    PARAGRAPH = "paragraph"
    BULLETS   = "bullets"
    NUMBERED  = "numbered"
    OUTLINE   = "outline"


class SummaryTone(str, Enum):
    """Register of the summary."""

    CASUAL       = "casual"
    PROFESSIONAL = "professional"
    ACADEMIC     = "academic"


class SummaryLength(int, Enum):
    """Approximate word-count targets offered by the form."""

    CONCISE  = 25
    BALANCED = 50
    DETAILED = 100

    @property
    def label(self) -> str:
        return self.name.capitalize()


DEFAULT_FORMAT = SummaryFormat.PARAGRAPH
DEFAULT_TONE = SummaryTone.PROFESSIONAL
DEFAULT_LENGTH = SummaryLength.CONCISE
