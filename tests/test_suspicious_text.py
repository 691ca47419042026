"""
Unit tests for SuspiciousTextDetector.
"""

import pytest

from widget_accessibility_utility.annotate.suspicious_text import SuspiciousTextDetector


@pytest.fixture
def detector():
    """SuspiciousTextDetector with default phrases and fields"""
    return SuspiciousTextDetector()


class TestSuspiciousTextDetector:
    """Test phrase matching and label synthesis"""

    @pytest.mark.parametrize("value", ["Read More", "read more", "READ MORE", "Click Here", "link"])
    def test_case_insensitive_exact_match(self, detector, value):
        assert detector.detect({"button": value}, "call-to-action") == "Learn more"

    @pytest.mark.parametrize("value", ["Read More Below", "more info", " here", ""])
    def test_substring_does_not_match(self, detector, value):
        assert detector.detect({"button": value}, "call-to-action") is None

    def test_field_priority(self, detector):
        result = detector.scan({"text": "here", "button": "details"}, "call-to-action")
        assert result.matched_key == "button"
        assert result.matched_value == "details"
        assert result.events[0].fields["matched_key"] == "button"

    def test_later_field_used_when_earlier_is_fine(self, detector):
        result = detector.scan({"button": "Buy the starter kit", "cta_text": "More"}, "cta")
        assert result.matched_key == "cta_text"

    def test_label_strips_title_markup(self, detector):
        settings = {"title": "<b>Premium</b> Hosting", "button": "details"}
        assert detector.detect(settings, "call-to-action") == "Learn more about Premium Hosting"

    def test_label_without_title(self, detector):
        assert detector.detect({"button": "details"}, "call-to-action") == "Learn more"

    def test_warning_event_fields(self, detector):
        result = detector.scan({"link_text": "Click here"}, "call-to-action")
        assert len(result.events) == 1
        event = result.events[0]
        assert event.level == "warning"
        assert event.fields["widget_name"] == "call-to-action"
        assert event.fields["matched_key"] == "link_text"
        assert event.fields["matched_value"] == "Click here"
        assert event.fields["wcag_criterion"] == "2.4.4"

    def test_no_match_has_no_events(self, detector):
        result = detector.scan({"button": "Start free trial"}, "call-to-action")
        assert result.label is None
        assert result.events == []

    def test_non_string_values_are_ignored(self, detector):
        assert detector.detect({"button": {"text": "here"}, "text": 5}, "cta") is None

    def test_deterministic(self, detector):
        settings = {"read_more_text": "More", "title": "Docs"}
        assert detector.scan(settings, "cta") == detector.scan(settings, "cta")

    def test_detect_emits_to_sink(self, detector):
        received = []
        detector.detect({"button": "here"}, "call-to-action", sink=received.append)
        assert [event.fields["matched_value"] for event in received] == ["here"]

    def test_failing_sink_does_not_break_detection(self, detector):
        def failing_sink(event):
            raise IOError("sink unavailable")

        label = detector.detect({"button": "here", "title": "Blog"}, "cta", sink=failing_sink)
        assert label == "Learn more about Blog"

    def test_injected_phrases_and_fields(self):
        detector = SuspiciousTextDetector(
            suspicious_phrases=["Mehr erfahren"],
            candidate_fields=["label"],
            label_prefix="Mehr zu ",
            default_label="Mehr",
        )
        assert detector.detect({"label": "mehr erfahren", "title": "Preisen"}, "cta") == (
            "Mehr zu Preisen"
        )
        assert detector.detect({"button": "here"}, "cta") is None

    def test_label_never_contains_markup_from_encoded_title(self, detector):
        settings = {"button": "details", "title": "<b>Plan</b> &lt;img src=x onerror=alert(1)&gt;"}
        label = detector.detect(settings, "cta")
        assert label.startswith("Learn more about Plan")
        assert "<" not in label
        assert ">" not in label

    def test_title_entities_decoded_with_or_without_tags(self, detector):
        plain = detector.detect({"button": "details", "title": "Tom &amp; Jerry"}, "cta")
        tagged = detector.detect({"button": "details", "title": "<b>Tom &amp; Jerry</b>"}, "cta")
        assert plain == tagged == "Learn more about Tom & Jerry"
