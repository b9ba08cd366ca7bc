"""
Summarizer Form Controller

Holds the form state (text, options, summary, loading flag) and performs
one request per submission against POST /api/generate-summary.

State flow:
  idle → submitting → (success | failure) → idle

Rules:
- Empty/whitespace text → local warning, no network call
- At most one outstanding request; a submit while submitting is ignored
- Any failure → one generic message; details only go to the log
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

import requests

from config import Config
from prompting import SummaryFormat, SummaryLength, SummaryTone, build_user_input
from prompting.options import DEFAULT_FORMAT, DEFAULT_LENGTH, DEFAULT_TONE

logger = logging.getLogger(__name__)

GENERATE_SUMMARY_PATH = "/api/generate-summary"
FAILURE_MESSAGE = "Failed to generate summary. Please try again."
NOTICE_DURATION_MS = 3000


class SubmissionState(str, Enum):
    IDLE       = "idle"
    SUBMITTING = "submitting"
    SUCCESS    = "success"
    FAILURE    = "failure"


class SummaryRequestError(Exception):
    """Non-OK reply from the summary endpoint."""


@dataclass
class Notice:
    """A short user-visible message (toast)."""

    title: str
    description: str
    variant: str = "default"   # default | destructive
    duration_ms: int = NOTICE_DURATION_MS


@dataclass
class SummarizeRequest:
    """What the user picked in the form."""

    text: str
    target_length: SummaryLength = DEFAULT_LENGTH
    format: SummaryFormat = DEFAULT_FORMAT
    tone: SummaryTone = DEFAULT_TONE

    def to_payload(self) -> Dict[str, Any]:
        return {
            "userInput": build_user_input(self.text, self.target_length),
            "format": SummaryFormat(self.format).value,
            "tone": SummaryTone(self.tone).value,
        }


@dataclass
class SummarizerController:
    """
    Client-side controller for the summarizer form.

    `session` only needs a requests-style `post(url, json=...)` returning an
    object with `status_code` and `json()`; a requests.Session by default.
    """

    base_url: str = Config.SUMMARIZER_API_URL
    session: Any = None
    notify: Optional[Callable[[Notice], None]] = None
    clock: Callable[[], float] = time.perf_counter
    timeout_s: Optional[float] = None

    text: str = ""
    target_length: SummaryLength = DEFAULT_LENGTH
    format: SummaryFormat = DEFAULT_FORMAT
    tone: SummaryTone = DEFAULT_TONE

    summary: str = ""
    state: SubmissionState = SubmissionState.IDLE
    last_outcome: Optional[SubmissionState] = None
    elapsed_s: Optional[float] = None
    notices: List[Notice] = field(default_factory=list)

    def __post_init__(self):
        if self.session is None:
            self.session = requests.Session()

    @property
    def is_loading(self) -> bool:
        return self.state == SubmissionState.SUBMITTING

    @property
    def word_count(self) -> int:
        return len(self.text.split())

    @property
    def summary_word_count(self) -> int:
        return len(self.summary.split())

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}{GENERATE_SUMMARY_PATH}"

    def _notify(self, notice: Notice) -> None:
        self.notices.append(notice)
        if self.notify:
            self.notify(notice)

    def submit(self) -> Optional[str]:
        """
        Submit the current text.

        Returns:
            The summary on success, None otherwise (empty text, busy, failure).
        """
        if self.is_loading:
            logger.debug("Submission ignored: request already in flight")
            return None

        if not self.text.strip():
            self._notify(Notice(
                title="No text provided",
                description="Please enter some text to summarize.",
                variant="destructive",
            ))
            return None

        request = SummarizeRequest(
            text=self.text,
            target_length=self.target_length,
            format=self.format,
            tone=self.tone,
        )

        self.state = SubmissionState.SUBMITTING
        self.summary = ""
        self.elapsed_s = None
        start = self.clock()

        try:
            kwargs = {"timeout": self.timeout_s} if self.timeout_s is not None else {}
            response = self.session.post(self.endpoint, json=request.to_payload(), **kwargs)

            if response.status_code != 200:
                raise SummaryRequestError(f"Failed to generate summary (HTTP {response.status_code})")

            data = response.json()
            self.summary = data["aiResponse"]

            self.elapsed_s = self.clock() - start
            self._notify(Notice(
                title="Summary Generated",
                description=f"Completed in {self.elapsed_s:.2f} seconds",
            ))
            self.last_outcome = SubmissionState.SUCCESS
            return self.summary

        except Exception as e:
            logger.error(f"Error generating summary: {e}")
            self.summary = FAILURE_MESSAGE
            self._notify(Notice(
                title="Error",
                description=FAILURE_MESSAGE,
                variant="destructive",
            ))
            self.last_outcome = SubmissionState.FAILURE
            return None

        finally:
            self.state = SubmissionState.IDLE
