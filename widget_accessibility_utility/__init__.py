# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Widget Accessibility Package.

This package repairs accessibility defects in rendered widget markup before it
reaches the page.

Main Components:
- Link label annotation for single-link widgets
- Suspicious link text detection
- Role conflict resolution for slider loop containers
"""

__version__ = "1.1.0"
