# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
HTML utility functions for widget fragment annotation.

Anchor opening tags are located textually so that every byte outside the
inserted attribute is preserved; the attribute list of each located tag is
parsed with BeautifulSoup to decide whether it already carries an aria-label.
"""

import html
import re
from typing import Callable, Dict, Optional, Tuple, Union
from bs4 import BeautifulSoup
import logging

logger = logging.getLogger(__name__)

# <a followed by whitespace and an attribute list. Quoted values may contain '>';
# unquoted values may contain stray quotes. Falls back to the first '>'.
ANCHOR_OPEN_TAG = re.compile(
    r"""<a(?P<attrs>\s(?:[^>"'=]|=\s*"[^"]*"|=\s*'[^']*'|=\s*[^\s>"'][^\s>]*(?=[\s>]))*|\s[^>]*)>""",
    re.IGNORECASE,
)

LabelSource = Union[str, Callable[[Dict[str, object]], Optional[str]]]

# Bound on re-parsing when decoded entities reveal further tags
_MAX_STRIP_PASSES = 5


def strip_tags(text: str) -> str:
    """
    Remove all markup from a text value.

    Entities are always decoded, and tags revealed by decoding (e.g. from
    '&lt;img&gt;') are removed as well. Any remaining angle bracket is dropped,
    so the result never contains markup.

    Args:
        text: Text that may contain HTML markup

    Returns:
        The plain text content
    """
    if not text:
        return ""

    text = BeautifulSoup(text, "html.parser").get_text()
    for _ in range(_MAX_STRIP_PASSES):
        if "<" not in text:
            break
        stripped = BeautifulSoup(text, "html.parser").get_text()
        if stripped == text:
            break
        text = stripped

    return text.replace("<", "").replace(">", "")


def escape_attribute_value(value: str) -> str:
    """
    Encode a value for use inside a double-quoted HTML attribute.

    Args:
        value: Raw attribute value

    Returns:
        Value with &, <, >, " and ' entity-encoded
    """
    return html.escape(value, quote=True)


def parse_tag_attributes(tag_html: str) -> Dict[str, object]:
    """
    Parse the attribute list of a single opening tag.

    Args:
        tag_html: An opening tag such as '<a href="/x" class="btn">'

    Returns:
        Dictionary of attributes keyed by lower-cased attribute name
    """
    soup = BeautifulSoup(tag_html, "html.parser")
    element = soup.find(True)
    if element is None:
        return {}
    return dict(element.attrs)


def add_aria_label_to_anchors(
    markup: str, label: LabelSource, escape: bool = True
) -> Tuple[str, int]:
    """
    Insert an aria-label attribute into every anchor that does not already have one.

    The attribute is placed immediately after the tag name. Anchors that already
    declare aria-label are left byte-identical, as is all other markup.

    Args:
        markup: HTML fragment to rewrite
        label: Label text, or a callable receiving the anchor's attributes and
            returning a label (None leaves that anchor untouched)
        escape: Whether to entity-encode the label before insertion

    Returns:
        Tuple of the rewritten fragment and the number of anchors annotated
    """
    if not markup or not label:
        return markup, 0

    annotated = 0

    def _annotate(match) -> str:
        nonlocal annotated
        tag = match.group(0)
        attributes = parse_tag_attributes(tag)

        if "aria-label" in attributes:
            return tag

        anchor_label = label(attributes) if callable(label) else label
        if not anchor_label:
            return tag

        if escape:
            anchor_label = escape_attribute_value(anchor_label)

        annotated += 1
        # tag[:2] keeps the original "<a" / "<A" spelling
        return f'{tag[:2]} aria-label="{anchor_label}"{tag[2:]}'

    result = ANCHOR_OPEN_TAG.sub(_annotate, markup)
    logger.debug(f"Annotated {annotated} anchor(s) in fragment of {len(markup)} characters")
    return result, annotated
