"""
Selector Builder Module

Builds a single locator string for a parsed element. Attributes assumed to
be stable across page revisions (ids, test ids) are preferred over class
names. Attribute values are not escaped; the selectors are meant to be
pasted into generated test code.
"""

from typing import Dict, List

from bs4 import Tag


TEST_ID_ATTRIBUTES = ("data-testid", "data-test-id")


def attribute_value(tag: Tag, name: str) -> str:
    """Return an attribute as a string, joining multi-valued attributes."""
    value = tag.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return value


def get_attributes(tag: Tag) -> Dict[str, str]:
    """
    Collect the element's attributes, keeping only non-empty values.

    Args:
        tag: Parsed element

    Returns:
        Mapping of attribute name to string value
    """
    attributes = {}
    for name in tag.attrs:
        value = attribute_value(tag, name)
        if value:
            attributes[name] = value
    return attributes


def _class_list(tag: Tag) -> List[str]:
    return [cls for cls in attribute_value(tag, "class").split() if cls]


def synthesize_selector(tag: Tag) -> str:
    """
    Generate a selector for an element.

    Priority: id, test id, name, role + aria-label, placeholder, then
    tag name with classes.

    Args:
        tag: Parsed element

    Returns:
        Non-empty selector string
    """
    element_id = attribute_value(tag, "id")
    if element_id:
        return f"#{element_id}"

    for test_attr in TEST_ID_ATTRIBUTES:
        test_id = attribute_value(tag, test_attr)
        if test_id:
            return f'[data-testid="{test_id}"]'

    name = attribute_value(tag, "name")
    if name:
        return f'[name="{name}"]'

    role = attribute_value(tag, "role")
    aria_label = attribute_value(tag, "aria-label")
    if role and aria_label:
        return f'[role="{role}"][aria-label="{aria_label}"]'

    placeholder = attribute_value(tag, "placeholder")
    if placeholder:
        return f'[placeholder="{placeholder}"]'

    classes = _class_list(tag)
    if classes:
        return ".".join([tag.name] + classes)

    return tag.name
