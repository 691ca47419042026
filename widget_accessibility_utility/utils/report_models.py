# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Pydantic models for annotation decisions, diagnostics and transformation results.
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Any, Union
from enum import Enum


class DiagnosticLevel(str, Enum):
    """Enum for diagnostic event levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"


class DecisionReason(str, Enum):
    """Enum for the reason behind an annotation decision."""

    UNSUPPORTED_WIDGET = "unsupported-widget"
    CUSTOM_ATTRIBUTES = "custom-attributes"
    NO_SUSPICIOUS_TEXT = "no-suspicious-text"
    TITLE_TEXT = "title-text"
    FALLBACK_LABEL = "fallback-label"
    SUSPICIOUS_TEXT = "suspicious-text"


class DiagnosticEvent(BaseModel):
    """Model for a structured diagnostic record handed to the host sink."""

    level: Union[DiagnosticLevel, str] = DiagnosticLevel.INFO
    message: str
    fields: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        """Configuration for DiagnosticEvent model."""

        use_enum_values = True


class AnnotationDecision(BaseModel):
    """Model for the decision to add an aria-label to a widget's anchors."""

    should_annotate: bool = False
    label: Optional[str] = None
    reason: Optional[Union[DecisionReason, str]] = None
    wcag_criterion: Optional[str] = None

    class Config:
        """Configuration for AnnotationDecision model."""

        use_enum_values = True


class DetectionResult(BaseModel):
    """Model for the outcome of a suspicious link text scan."""

    label: Optional[str] = None
    matched_key: Optional[str] = None
    matched_value: Optional[str] = None
    events: List[DiagnosticEvent] = Field(default_factory=list)


class AnnotationResult(BaseModel):
    """Model for an annotated widget fragment."""

    markup: str
    decision: AnnotationDecision = Field(default_factory=AnnotationDecision)
    annotated_count: int = 0
    events: List[DiagnosticEvent] = Field(default_factory=list)


class RoleResolution(BaseModel):
    """Model for a loop container attribute set after role conflict resolution."""

    attributes: Dict[str, Any] = Field(default_factory=dict)
    role_removed: bool = False
    events: List[DiagnosticEvent] = Field(default_factory=list)
