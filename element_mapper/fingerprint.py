"""
Page Fingerprint Module

Hashes the interactive shape of a page so structurally identical pages
(same element kinds and selectors, any order, any text) can be skipped.
"""

import hashlib
from typing import Iterable

from .models import Element


SIGNATURE_SEPARATOR = "|"


def element_signature(element: Element) -> str:
    return f"{element.kind}:{element.selector}"


def page_fingerprint(elements: Iterable[Element]) -> str:
    """
    Generate a fingerprint for a page based on its interactive elements.

    Args:
        elements: Elements extracted from the page

    Returns:
        32-character hex digest
    """
    signatures = sorted(element_signature(element) for element in elements)
    joined = SIGNATURE_SEPARATOR.join(signatures)
    return hashlib.md5(joined.encode("utf-8")).hexdigest()
