# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
WCAG standards and criteria information.

This module provides information about the WCAG criteria repaired by this package.
"""

# WCAG criteria information
WCAG_CRITERIA = {
    "2.4.4": {
        "name": "Link Purpose (In Context)",
        "level": "A",
        "description": "The purpose of each link can be determined from the link text alone or from the link text together with its programmatically determined link context.",
    },
    "4.1.2": {
        "name": "Name, Role, Value",
        "level": "A",
        "description": "For all user interface components, the name and role can be programmatically determined.",
    },
}

# Defect classes to the criterion they violate
DEFECT_CRITERIA = {
    "suspicious-link-text": "2.4.4",
    "missing-link-label": "2.4.4",
    "conflicting-container-role": "4.1.2",
}


def get_criterion_for_defect(defect_type: str) -> str:
    """
    Get the WCAG criterion for a defect class.

    Args:
        defect_type: The defect class identifier

    Returns:
        WCAG criterion number, or an empty string if unknown
    """
    return DEFECT_CRITERIA.get(defect_type, "")


def get_criterion_info(criterion: str) -> dict:
    """
    Get information about a WCAG criterion.

    Args:
        criterion: The WCAG criterion number (e.g., "2.4.4")

    Returns:
        Dictionary with criterion information
    """
    return WCAG_CRITERIA.get(
        criterion,
        {
            "name": "Unknown Criterion",
            "level": "Unknown",
            "description": "No information available for this criterion.",
        },
    )
