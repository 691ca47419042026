# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Widget Accessibility API.

This module provides the entry points a host rendering pipeline calls: one per
widget render and one per loop container attribute computation. Both entry
points always return usable output; accessibility enhancement degrades to
passing the input through rather than breaking the page.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from widget_accessibility_utility.annotate.label_annotator import LabelAnnotator
from widget_accessibility_utility.annotate.role_resolver import (
    DEFAULT_ROLE_CONFLICT_MARKER,
    RoleConflictResolver,
)
from widget_accessibility_utility.standards import get_criterion_info
from widget_accessibility_utility.utils.config import (
    ANNOTATE_OPTION_TYPES,
    config_manager,
    load_config_file,
    validate_options,
)
from widget_accessibility_utility.utils.logging_helper import (
    ConfigurationError,
    DiagnosticSink,
    emit_diagnostics,
    log_exception,
    setup_logger,
)

# Set up module-level logger
logger = setup_logger(__name__)


class WidgetAccessibilityAssistant:
    """Host hook facade combining the label annotator and the role resolver."""

    def __init__(
        self,
        options: Optional[Dict[str, Any]] = None,
        sink: Optional[DiagnosticSink] = None,
    ):
        """
        Initialize the assistant.

        Args:
            options: Overrides for the 'annotate' configuration section
            sink: Diagnostic sink (defaults to the package logger)

        Raises:
            ConfigurationError: If an option has the wrong type
        """
        self.options = config_manager.get_config(options, section="annotate")
        validate_options(self.options, optional_fields=ANNOTATE_OPTION_TYPES)
        logger.debug(f"Annotation options: {self.options}")

        self.sink = sink
        self.annotator = LabelAnnotator.from_options(self.options)
        self.resolver = RoleConflictResolver(
            self.options.get("role_conflict_marker", DEFAULT_ROLE_CONFLICT_MARKER)
        )

    @classmethod
    def from_config_file(
        cls, file_path: str, sink: Optional[DiagnosticSink] = None
    ) -> "WidgetAccessibilityAssistant":
        """
        Build an assistant from a YAML or JSON configuration file.

        The file may hold the options directly or under an 'annotate' key.
        """
        loaded = load_config_file(file_path)
        options = loaded.get("annotate", loaded) if isinstance(loaded, dict) else {}
        return cls(options=options, sink=sink)

    def render_content(
        self, widget_type: str, settings: Mapping[str, Any], markup: str
    ) -> str:
        """
        Render-content hook: annotate a rendered widget fragment.

        Args:
            widget_type: The widget type name (e.g. 'image-box')
            settings: The widget settings
            markup: The rendered widget fragment

        Returns:
            The possibly annotated fragment, or the input on any failure
        """
        try:
            result = self.annotator.annotate_fragment(widget_type, settings, markup)
        except Exception as e:
            log_exception(logger, e, f"Error annotating {widget_type} widget")
            return markup

        if result.annotated_count:
            criterion = result.decision.wcag_criterion
            logger.debug(
                f"Added aria-label to {result.annotated_count} anchor(s) in {widget_type} widget "
                f"(WCAG {criterion} {get_criterion_info(criterion)['name']})"
            )
        emit_diagnostics(result.events, self.sink)
        return result.markup

    def loop_header_attributes(self, attributes: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Loop container attribute hook: drop roles that conflict with a slider.

        Args:
            attributes: The container attribute mapping

        Returns:
            The possibly modified attribute mapping, or the input on any failure
        """
        return self.resolver.resolve(attributes, self.sink)


_default_assistant: Optional[WidgetAccessibilityAssistant] = None


def get_default_assistant() -> WidgetAccessibilityAssistant:
    """Get the shared assistant built from the global configuration."""
    global _default_assistant
    if _default_assistant is None:
        _default_assistant = WidgetAccessibilityAssistant()
    return _default_assistant


def _assistant_for(options: Optional[Dict[str, Any]]) -> WidgetAccessibilityAssistant:
    """Build an assistant for per-call options, falling back to the shared one."""
    if not options:
        return get_default_assistant()
    try:
        return WidgetAccessibilityAssistant(options)
    except ConfigurationError as e:
        log_exception(
            logger, e, "Invalid annotation options, using defaults", level=logging.WARNING
        )
        return get_default_assistant()


def annotate_widget_content(
    widget_type: str,
    settings: Mapping[str, Any],
    markup: str,
    options: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Annotate a rendered widget fragment.

    Args:
        widget_type: The widget type name
        settings: The widget settings
        markup: The rendered widget fragment
        options: Optional overrides for the 'annotate' configuration section

    Returns:
        The possibly annotated fragment
    """
    assistant = _assistant_for(options)
    return assistant.render_content(widget_type, settings, markup)


def resolve_loop_header_attributes(
    attributes: Mapping[str, Any], options: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Remove a container role that conflicts with slider semantics.

    Args:
        attributes: The container attribute mapping
        options: Optional overrides for the 'annotate' configuration section

    Returns:
        The possibly modified attribute mapping
    """
    assistant = _assistant_for(options)
    return assistant.loop_header_attributes(attributes)
