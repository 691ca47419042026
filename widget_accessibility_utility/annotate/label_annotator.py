# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Link label annotation for rendered widget fragments.

This module decides whether the anchors of a rendered widget need an aria-label
(WCAG 2.4.4) and rewrites the fragment accordingly. Widgets whose author has
supplied custom link attributes are never touched.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from widget_accessibility_utility.annotate.suspicious_text import SuspiciousTextDetector
from widget_accessibility_utility.standards import get_criterion_for_defect
from widget_accessibility_utility.utils.html_utils import add_aria_label_to_anchors
from widget_accessibility_utility.utils.logging_helper import (
    DiagnosticSink,
    emit_diagnostics,
    log_exception,
    setup_logger,
)
from widget_accessibility_utility.utils.report_models import (
    AnnotationDecision,
    AnnotationResult,
    DecisionReason,
    DiagnosticEvent,
)

# Set up module-level logger
logger = setup_logger(__name__)

DEFAULT_FALLBACK_LABELS = {
    "image-box": "Image box",
    "icon-box": "Icon box",
}

DEFAULT_CONTEXTUAL_WIDGETS = ("call-to-action",)


def has_custom_link_attributes(settings: Mapping[str, Any]) -> bool:
    """
    Check whether the widget author supplied their own link attributes.

    Args:
        settings: The widget settings

    Returns:
        True if settings.link.custom_attributes is non-empty
    """
    link = settings.get("link")
    if not isinstance(link, Mapping):
        return False
    return bool(link.get("custom_attributes"))


class LabelAnnotator:
    """Add aria-label attributes to the anchors of single-link widgets."""

    def __init__(
        self,
        detector: Optional[SuspiciousTextDetector] = None,
        fallback_labels: Optional[Mapping[str, str]] = None,
        contextual_widgets: Iterable[str] = DEFAULT_CONTEXTUAL_WIDGETS,
        escape_labels: bool = True,
    ):
        """
        Initialize the annotator.

        Args:
            detector: Detector used to label contextual widgets
            fallback_labels: Widget type to label used when title_text is empty
            contextual_widgets: Widget types labelled from suspicious link text
            escape_labels: Whether labels are entity-encoded before insertion
        """
        self.detector = detector or SuspiciousTextDetector()
        self.fallback_labels = dict(
            DEFAULT_FALLBACK_LABELS if fallback_labels is None else fallback_labels
        )
        self.contextual_widgets = frozenset(contextual_widgets)
        self.escape_labels = escape_labels

    def supports(self, widget_type: str) -> bool:
        """Check whether a widget type is handled by the annotator."""
        return widget_type in self.fallback_labels or widget_type in self.contextual_widgets

    def decide(
        self, widget_type: str, settings: Mapping[str, Any]
    ) -> Tuple[AnnotationDecision, List[DiagnosticEvent]]:
        """
        Decide whether a widget's anchors need an aria-label, and which one.

        Args:
            widget_type: The widget type name (e.g. 'image-box')
            settings: The widget settings

        Returns:
            Tuple of the decision and the diagnostic events raised while deciding
        """
        if not self.supports(widget_type):
            return AnnotationDecision(reason=DecisionReason.UNSUPPORTED_WIDGET), []

        if not isinstance(settings, Mapping):
            settings = {}

        if has_custom_link_attributes(settings):
            logger.debug(f"Skipping {widget_type}: author supplied custom link attributes")
            return AnnotationDecision(reason=DecisionReason.CUSTOM_ATTRIBUTES), []

        if widget_type in self.contextual_widgets:
            detection = self.detector.scan(settings, widget_type)
            if not detection.label:
                return (
                    AnnotationDecision(reason=DecisionReason.NO_SUSPICIOUS_TEXT),
                    detection.events,
                )
            return (
                AnnotationDecision(
                    should_annotate=True,
                    label=detection.label,
                    reason=DecisionReason.SUSPICIOUS_TEXT,
                    wcag_criterion=get_criterion_for_defect("suspicious-link-text"),
                ),
                detection.events,
            )

        title_text = settings.get("title_text")
        if title_text and isinstance(title_text, str):
            return (
                AnnotationDecision(
                    should_annotate=True,
                    label=title_text,
                    reason=DecisionReason.TITLE_TEXT,
                    wcag_criterion=get_criterion_for_defect("missing-link-label"),
                ),
                [],
            )

        return (
            AnnotationDecision(
                should_annotate=True,
                label=self.fallback_labels[widget_type],
                reason=DecisionReason.FALLBACK_LABEL,
                wcag_criterion=get_criterion_for_defect("missing-link-label"),
            ),
            [],
        )

    def annotate_fragment(
        self, widget_type: str, settings: Mapping[str, Any], markup: str
    ) -> AnnotationResult:
        """
        Annotate a widget fragment without emitting diagnostics.

        Args:
            widget_type: The widget type name
            settings: The widget settings
            markup: The rendered widget fragment

        Returns:
            AnnotationResult carrying the new markup, decision and events
        """
        decision, events = self.decide(widget_type, settings)
        if not decision.should_annotate:
            return AnnotationResult(markup=markup, decision=decision, events=events)

        new_markup, count = add_aria_label_to_anchors(
            markup, decision.label, escape=self.escape_labels
        )
        return AnnotationResult(
            markup=new_markup, decision=decision, annotated_count=count, events=events
        )

    def annotate(
        self,
        widget_type: str,
        settings: Mapping[str, Any],
        markup: str,
        sink: Optional[DiagnosticSink] = None,
    ) -> str:
        """
        Annotate a widget fragment, emitting diagnostics to the sink.

        Any internal failure returns the original markup unchanged.

        Args:
            widget_type: The widget type name
            settings: The widget settings
            markup: The rendered widget fragment
            sink: Diagnostic sink (defaults to the package logger)

        Returns:
            The possibly annotated markup
        """
        try:
            result = self.annotate_fragment(widget_type, settings, markup)
        except Exception as e:
            log_exception(logger, e, f"Error annotating {widget_type} widget")
            return markup

        emit_diagnostics(result.events, sink)
        return result.markup

    @classmethod
    def from_options(cls, options: Dict[str, Any]) -> "LabelAnnotator":
        """Build an annotator from an 'annotate' configuration section."""
        return cls(
            detector=SuspiciousTextDetector.from_options(options),
            fallback_labels=options.get("fallback_labels", DEFAULT_FALLBACK_LABELS),
            contextual_widgets=options.get("contextual_widgets", DEFAULT_CONTEXTUAL_WIDGETS),
            escape_labels=options.get("escape_labels", True),
        )
