"""
Command-line front end for the summarizer form.

Usage:
  python -m client article.txt --length 50 --format bullets --tone casual
  cat article.txt | python -m client --url http://localhost:8000
"""

import argparse
import sys
from typing import List, Optional

from config import Config
from prompting import SummaryFormat, SummaryLength, SummaryTone

from .controller import Notice, SubmissionState, SummarizerController


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m client",
        description="Summarize text through the Summarizer API",
    )
    parser.add_argument("file", nargs="?", help="Text file to summarize (default: stdin)")
    parser.add_argument("--url", default=Config.SUMMARIZER_API_URL, help="Summarizer API base URL")
    parser.add_argument(
        "--length",
        type=int,
        choices=[length.value for length in SummaryLength],
        default=SummaryLength.CONCISE.value,
        help="Approximate summary length in words",
    )
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in SummaryFormat],
        default=SummaryFormat.PARAGRAPH.value,
    )
    parser.add_argument(
        "--tone",
        choices=[tone.value for tone in SummaryTone],
        default=SummaryTone.PROFESSIONAL.value,
    )
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    return parser


def print_notice(notice: Notice) -> None:
    prefix = "✗" if notice.variant == "destructive" else "✓"
    print(f"{prefix} {notice.title}: {notice.description}", file=sys.stderr)


def main(argv: Optional[List[str]] = None, controller: Optional[SummarizerController] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.file:
        with open(args.file, encoding="utf-8") as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    if controller is None:
        controller = SummarizerController(base_url=args.url, timeout_s=args.timeout)
    controller.notify = print_notice
    controller.text = text
    controller.target_length = SummaryLength(args.length)
    controller.format = SummaryFormat(args.format)
    controller.tone = SummaryTone(args.tone)

    print(f"Text length: {controller.word_count} words", file=sys.stderr)
    summary = controller.submit()

    if controller.last_outcome == SubmissionState.FAILURE:
        print(controller.summary)
        return 1
    if summary is None:
        return 1

    print(f"Summary length: {controller.summary_word_count} words", file=sys.stderr)
    print(summary)
    return 0
