"""Feedback prompt shown once the commit counter reaches the threshold.

Transport is stubbed: the report is printed instead of mailed.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from convcommit.config import Config, FEEDBACK_THRESHOLD
from convcommit.output import dim, print_success, warning

FEEDBACK_ADDRESS = "convcommit-feedback@example.com"


@dataclass
class FeedbackReport:
    rating: str
    suggestions: str
    sender: str = ""


def _ask(input_fn: Callable[[str], str], prompt: str) -> str:
    try:
        return input_fn(prompt).strip()
    except EOFError:
        return ''


def prompt_for_feedback(input_fn: Optional[Callable[[str], str]] = None, sender: str = "") -> FeedbackReport:
    input_fn = input_fn or input
    print(warning(f"\nYou've made {FEEDBACK_THRESHOLD} commits with convcommit! We'd love your feedback:"))
    rating = _ask(input_fn, warning("How satisfied are you with this tool (1-5)? "))
    suggestions = _ask(input_fn, warning("Any suggestions for improvement? "))
    return FeedbackReport(rating=rating, suggestions=suggestions, sender=sender)


def send_feedback(report: FeedbackReport) -> None:
    """Print the report that would be mailed to FEEDBACK_ADDRESS."""
    print(dim(f"Would send email with rating: {report.rating}, suggestions: {report.suggestions}"))
    print_success(f"Feedback sent to {FEEDBACK_ADDRESS}")


def check_feedback(config: Config, input_fn: Optional[Callable[[str], str]] = None) -> bool:
    """Run the feedback flow if the counter is exactly at the threshold.

    Returns:
        True if feedback was collected
    """
    if not config.feedback_due:
        return False
    send_feedback(prompt_for_feedback(input_fn, sender=config.user_email))
    return True
