# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Suspicious link text detection.

This module scans the text-bearing settings of a widget for low-information link
phrases such as "click here" and synthesizes a contextual replacement label.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from widget_accessibility_utility.standards import get_criterion_for_defect
from widget_accessibility_utility.utils.html_utils import strip_tags
from widget_accessibility_utility.utils.logging_helper import (
    DiagnosticSink,
    emit_diagnostics,
)
from widget_accessibility_utility.utils.report_models import (
    DetectionResult,
    DiagnosticEvent,
    DiagnosticLevel,
)

DEFAULT_SUSPICIOUS_PHRASES = ("click here", "here", "read more", "more", "details", "link")

# Checked in order, first match wins
DEFAULT_CANDIDATE_FIELDS = ("button", "link_text", "read_more_text", "cta_text", "text")

DEFAULT_LABEL_PREFIX = "Learn more about "
DEFAULT_LABEL = "Learn more"


class SuspiciousTextDetector:
    """Detect generic link text in widget settings (WCAG 2.4.4)."""

    def __init__(
        self,
        suspicious_phrases: Iterable[str] = DEFAULT_SUSPICIOUS_PHRASES,
        candidate_fields: Iterable[str] = DEFAULT_CANDIDATE_FIELDS,
        label_prefix: str = DEFAULT_LABEL_PREFIX,
        default_label: str = DEFAULT_LABEL,
    ):
        """
        Initialize the detector.

        Args:
            suspicious_phrases: Phrases treated as low-information link text
            candidate_fields: Settings keys to check, in priority order
            label_prefix: Prefix placed before the stripped widget title
            default_label: Label used when the widget has no title
        """
        self.suspicious_phrases = frozenset(phrase.lower() for phrase in suspicious_phrases)
        self.candidate_fields = tuple(candidate_fields)
        self.label_prefix = label_prefix
        self.default_label = default_label

    def is_suspicious(self, text: Any) -> bool:
        """Case-insensitive exact match against the phrase set."""
        return isinstance(text, str) and bool(text) and text.lower() in self.suspicious_phrases

    def build_label(self, settings: Mapping[str, Any]) -> str:
        """
        Build the contextual label for a widget with generic link text.

        Args:
            settings: The widget settings

        Returns:
            "<prefix><title without tags>" or the default label
        """
        title = settings.get("title")
        if title and isinstance(title, str):
            return self.label_prefix + strip_tags(title)
        return self.default_label

    def scan(self, settings: Mapping[str, Any], widget_name: str) -> DetectionResult:
        """
        Scan the candidate fields of a widget for suspicious link text.

        Args:
            settings: The widget settings
            widget_name: Widget type name, carried in the diagnostic event

        Returns:
            DetectionResult with the label and a warning event on the first match,
            or an empty result when no field matches
        """
        if not isinstance(settings, Mapping):
            return DetectionResult()

        for key in self.candidate_fields:
            value = settings.get(key)
            if not self.is_suspicious(value):
                continue

            event = DiagnosticEvent(
                level=DiagnosticLevel.WARNING,
                message=f"Suspicious link text '{value}' found in widget {widget_name}",
                fields={
                    "widget_name": widget_name,
                    "matched_key": key,
                    "matched_value": value,
                    "wcag_criterion": get_criterion_for_defect("suspicious-link-text"),
                },
            )
            return DetectionResult(
                label=self.build_label(settings),
                matched_key=key,
                matched_value=value,
                events=[event],
            )

        return DetectionResult()

    def detect(
        self,
        settings: Mapping[str, Any],
        widget_name: str,
        sink: Optional[DiagnosticSink] = None,
    ) -> Optional[str]:
        """
        Return a replacement label when suspicious link text is found, else None.

        The match diagnostic is handed to the sink (the package logger by default).
        """
        result = self.scan(settings, widget_name)
        emit_diagnostics(result.events, sink)
        return result.label

    @classmethod
    def from_options(cls, options: Dict[str, Any]) -> "SuspiciousTextDetector":
        """Build a detector from an 'annotate' configuration section."""
        return cls(
            suspicious_phrases=options.get("suspicious_phrases", DEFAULT_SUSPICIOUS_PHRASES),
            candidate_fields=options.get("candidate_fields", DEFAULT_CANDIDATE_FIELDS),
            label_prefix=options.get("label_prefix", DEFAULT_LABEL_PREFIX),
            default_label=options.get("default_label", DEFAULT_LABEL),
        )
