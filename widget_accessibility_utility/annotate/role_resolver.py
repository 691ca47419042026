# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Role conflict resolution for loop container attributes.

Slider containers get their ARIA semantics from the slider script, so a role
computed by the host for the same container (e.g. role="list") is removed
(WCAG 4.1.2).
"""

from typing import Any, Dict, List, Mapping, Optional

from widget_accessibility_utility.standards import get_criterion_for_defect
from widget_accessibility_utility.utils.logging_helper import (
    DiagnosticSink,
    emit_diagnostics,
    log_exception,
    setup_logger,
)
from widget_accessibility_utility.utils.report_models import (
    DiagnosticEvent,
    DiagnosticLevel,
    RoleResolution,
)

# Set up module-level logger
logger = setup_logger(__name__)

DEFAULT_ROLE_CONFLICT_MARKER = "swiper"


def _snapshot(attributes: Mapping[str, Any], stage: str) -> DiagnosticEvent:
    return DiagnosticEvent(
        level=DiagnosticLevel.DEBUG,
        message=f"Loop header attributes {stage}",
        fields={"attributes": dict(attributes)},
    )


class RoleConflictResolver:
    """Remove host-assigned roles from containers driven by a slider script."""

    def __init__(self, marker: str = DEFAULT_ROLE_CONFLICT_MARKER):
        """
        Initialize the resolver.

        Args:
            marker: Case-sensitive substring identifying slider classes
        """
        self.marker = marker

    def has_marker_class(self, classes: Any) -> bool:
        """Check whether any class token contains the marker substring."""
        if not classes or not isinstance(classes, (list, tuple)):
            return False
        return any(isinstance(cls, str) and self.marker in cls for cls in classes)

    def resolve_attributes(self, attributes: Mapping[str, Any]) -> RoleResolution:
        """
        Resolve a role conflict without emitting diagnostics.

        Args:
            attributes: The container attribute mapping

        Returns:
            RoleResolution with a new attribute mapping and before/after snapshots
        """
        events: List[DiagnosticEvent] = [_snapshot(attributes, "before")]
        resolved: Dict[str, Any] = dict(attributes)
        role_removed = False

        if self.has_marker_class(resolved.get("class")) and resolved.get("role") is not None:
            del resolved["role"]
            role_removed = True
            events.append(
                DiagnosticEvent(
                    level=DiagnosticLevel.INFO,
                    message=f'Removed role attribute because element contains "{self.marker}" class.',
                    fields={
                        "removed_role": attributes["role"],
                        "wcag_criterion": get_criterion_for_defect(
                            "conflicting-container-role"
                        ),
                    },
                )
            )

        events.append(_snapshot(resolved, "after"))
        return RoleResolution(attributes=resolved, role_removed=role_removed, events=events)

    def resolve(
        self, attributes: Mapping[str, Any], sink: Optional[DiagnosticSink] = None
    ) -> Dict[str, Any]:
        """
        Resolve a role conflict, emitting the snapshots to the sink.

        Any internal failure returns the attributes unchanged.

        Args:
            attributes: The container attribute mapping
            sink: Diagnostic sink (defaults to the package logger)

        Returns:
            The possibly modified attribute mapping
        """
        try:
            result = self.resolve_attributes(attributes)
        except Exception as e:
            log_exception(logger, e, "Error resolving loop header attributes")
            return attributes

        emit_diagnostics(result.events, sink)
        return result.attributes
