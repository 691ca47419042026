# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Accessibility annotation rules for rendered widgets and loop containers.
"""

from widget_accessibility_utility.annotate.label_annotator import LabelAnnotator
from widget_accessibility_utility.annotate.role_resolver import RoleConflictResolver
from widget_accessibility_utility.annotate.suspicious_text import SuspiciousTextDetector

__all__ = ["LabelAnnotator", "RoleConflictResolver", "SuspiciousTextDetector"]
