"""
Element Extractor Module

Scans a parsed HTML document for interactive elements and turns each match
into a typed element record. Extraction runs as a fixed sequence of passes;
within a pass elements keep document order.
"""

from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from .models import (
    Button,
    Checkbox,
    Dropdown,
    Element,
    Form,
    Heading,
    Input,
    Interactive,
    Link,
    Option,
    Radio,
)
from .selector_builder import attribute_value, get_attributes, synthesize_selector


BUTTON_SELECTORS = [
    "button",
    "[role='button']",
    "input[type='button']",
    "input[type='submit']",
]

# Elements wired up through script handlers rather than native controls
CLICK_HANDLER_SELECTORS = ["[onclick]", "[data-click]", "[data-action]"]

INPUT_SELECTOR = "input:not([type='hidden']), textarea, select"

ARIA_INTERACTIVE_ROLES = ["menu", "menuitem", "tab", "combobox", "slider", "switch"]

HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"


def parse_html(html_content: str) -> BeautifulSoup:
    """Parse an HTML document with the same parser used across the package."""
    return BeautifulSoup(html_content, "html.parser")


def page_title(soup: BeautifulSoup) -> str:
    title = soup.find("title")
    return title.get_text().strip() if title else ""


def _optional(tag: Tag, name: str) -> Optional[str]:
    """Attribute value or None when absent."""
    if tag.get(name) is None:
        return None
    return attribute_value(tag, name)


def _text(tag: Tag) -> str:
    return tag.get_text().strip()


class ElementExtractor:
    """Extracts interactive elements from parsed HTML."""

    def __init__(self, detailed: bool = True):
        """
        Initialize the extractor.

        Args:
            detailed: Run the multi-page analysis passes (click handlers,
                checkboxes, radios, dropdowns, forms, ARIA widgets). When
                False, run the single-page passes, which add headings.
        """
        self.detailed = detailed

    def extract(self, soup: BeautifulSoup) -> List[Element]:
        """
        Extract all interactive elements from a document.

        Args:
            soup: Parsed HTML document

        Returns:
            Elements in pass order
        """
        elements: List[Element] = []
        elements.extend(self._extract_buttons(soup))
        elements.extend(self._extract_links(soup))
        elements.extend(self._extract_inputs(soup))

        if self.detailed:
            elements.extend(self._extract_toggles(soup))
            elements.extend(self._extract_dropdowns(soup))
            elements.extend(self._extract_forms(soup))
            elements.extend(self._extract_aria_widgets(soup))
        else:
            elements.extend(self._extract_headings(soup))

        return elements

    def _extract_buttons(self, soup: BeautifulSoup) -> List[Button]:
        selectors = list(BUTTON_SELECTORS)
        if self.detailed:
            selectors.extend(CLICK_HANDLER_SELECTORS)

        return [
            Button(
                text=_text(tag),
                selector=synthesize_selector(tag),
                attributes=get_attributes(tag),
            )
            for tag in soup.select(", ".join(selectors))
        ]

    def _extract_links(self, soup: BeautifulSoup) -> List[Link]:
        # Every anchor is kept; href is resolved later by the crawler
        return [
            Link(
                text=_text(tag),
                href=_optional(tag, "href"),
                selector=synthesize_selector(tag),
                attributes=get_attributes(tag),
            )
            for tag in soup.find_all("a")
        ]

    def _extract_inputs(self, soup: BeautifulSoup) -> List[Input]:
        return [
            Input(
                input_type=attribute_value(tag, "type") or "text",
                name=_optional(tag, "name"),
                id=_optional(tag, "id"),
                placeholder=_optional(tag, "placeholder"),
                selector=synthesize_selector(tag),
                attributes=get_attributes(tag),
            )
            for tag in soup.select(INPUT_SELECTOR)
        ]

    def _extract_toggles(self, soup: BeautifulSoup) -> List[Checkbox]:
        """Checkboxes and radios, which also appear in the generic input pass."""
        toggles = []
        for tag in soup.select("input[type='checkbox'], input[type='radio']"):
            is_checkbox = attribute_value(tag, "type").lower() == "checkbox"
            toggle_class = Checkbox if is_checkbox else Radio
            toggles.append(
                toggle_class(
                    name=_optional(tag, "name"),
                    id=_optional(tag, "id"),
                    value=_optional(tag, "value"),
                    selector=synthesize_selector(tag),
                    attributes=get_attributes(tag),
                )
            )
        return toggles

    def _extract_dropdowns(self, soup: BeautifulSoup) -> List[Dropdown]:
        dropdowns = []
        for tag in soup.find_all("select"):
            options = tuple(
                Option(value=_optional(option, "value"), text=_text(option))
                for option in tag.find_all("option")
            )
            dropdowns.append(
                Dropdown(
                    name=_optional(tag, "name"),
                    id=_optional(tag, "id"),
                    options=options,
                    selector=synthesize_selector(tag),
                    attributes=get_attributes(tag),
                )
            )
        return dropdowns

    def _extract_forms(self, soup: BeautifulSoup) -> List[Form]:
        return [
            Form(
                id=_optional(tag, "id"),
                action=_optional(tag, "action"),
                method=_optional(tag, "method"),
                selector=synthesize_selector(tag),
                attributes=get_attributes(tag),
            )
            for tag in soup.find_all("form")
        ]

    def _extract_aria_widgets(self, soup: BeautifulSoup) -> List[Interactive]:
        selector = ", ".join(f"[role='{role}']" for role in ARIA_INTERACTIVE_ROLES)
        return [
            Interactive(
                role=attribute_value(tag, "role"),
                text=_text(tag),
                selector=synthesize_selector(tag),
                attributes=get_attributes(tag),
            )
            for tag in soup.select(selector)
        ]

    def _extract_headings(self, soup: BeautifulSoup) -> List[Heading]:
        return [
            Heading(
                level=int(tag.name[1]),
                text=_text(tag),
                selector=synthesize_selector(tag),
                attributes=get_attributes(tag),
            )
            for tag in soup.select(HEADING_SELECTOR)
        ]
