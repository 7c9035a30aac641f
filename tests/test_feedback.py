"""
Tests for the feedback prompt shown at the commit-count threshold.

Run with:
    pytest tests/test_feedback.py -v
"""

import pytest

from convcommit.config import Config, FEEDBACK_THRESHOLD
from convcommit.feedback import FEEDBACK_ADDRESS, FeedbackReport, check_feedback, prompt_for_feedback


class TestPromptForFeedback:

    def test_collects_rating_and_suggestions(self, scripted_input):
        report = prompt_for_feedback(scripted_input(["  4 ", " more colors "]), sender="dev@example.com")
        assert report == FeedbackReport(rating="4", suggestions="more colors", sender="dev@example.com")

    def test_input_closed_after_rating(self, scripted_input):
        report = prompt_for_feedback(scripted_input(["5"]))
        assert report == FeedbackReport(rating="5", suggestions="")

    def test_input_closed_immediately(self, scripted_input):
        report = prompt_for_feedback(scripted_input([]))
        assert report == FeedbackReport(rating="", suggestions="")

    def test_asks_two_questions(self, scripted_input, strip_ansi):
        reader = scripted_input(["3", "none"])
        prompt_for_feedback(reader)
        prompts = [strip_ansi(p) for p in reader.prompts]
        assert prompts == [
            "How satisfied are you with this tool (1-5)? ",
            "Any suggestions for improvement? ",
        ]


class TestCheckFeedback:

    def test_prompts_at_threshold(self, scripted_input, capsys, strip_ansi):
        assert check_feedback(Config(commit_count=FEEDBACK_THRESHOLD), scripted_input(["5", "great"])) is True
        out = strip_ansi(capsys.readouterr().out)
        assert f"You've made {FEEDBACK_THRESHOLD} commits" in out
        assert "Would send email with rating: 5, suggestions: great" in out
        assert f"Feedback sent to {FEEDBACK_ADDRESS}" in out

    @pytest.mark.parametrize("count", [0, FEEDBACK_THRESHOLD - 1, FEEDBACK_THRESHOLD + 1])
    def test_silent_off_threshold(self, scripted_input, capsys, count):
        reader = scripted_input(["5", "great"])
        assert check_feedback(Config(commit_count=count), reader) is False
        assert reader.prompts == []
        assert capsys.readouterr().out == ""

    def test_input_closed_mid_prompt(self, scripted_input, capsys, strip_ansi):
        assert check_feedback(Config(commit_count=FEEDBACK_THRESHOLD), scripted_input(["2"])) is True
        out = strip_ansi(capsys.readouterr().out)
        assert "Would send email with rating: 2, suggestions: " in out
