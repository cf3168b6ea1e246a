"""
Models Module

Data types produced by the extractor and crawler and consumed by the
report formatter and downstream test generators.

Each element kind is its own frozen dataclass carrying only the fields
relevant to that kind. ``ELEMENT_TYPES`` maps the closed kind set to its
class.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urlparse


@dataclass(frozen=True)
class Element:
    """Base record for one interactive node found on a page."""

    kind: ClassVar[str] = ""

    selector: str
    text: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Read-only copy so the record cannot change after extraction
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def to_dict(self) -> Dict:
        """Serialize the element, dropping kind-specific fields that are None."""
        data = {"kind": self.kind, "text": self.text, "selector": self.selector}
        data.update(
            {k: v for k, v in self._extra_fields().items() if v is not None}
        )
        data["attributes"] = dict(self.attributes)
        return data

    def _extra_fields(self) -> Dict:
        return {}


@dataclass(frozen=True)
class Button(Element):
    kind: ClassVar[str] = "button"


@dataclass(frozen=True)
class Link(Element):
    kind: ClassVar[str] = "link"

    href: Optional[str] = None

    def _extra_fields(self) -> Dict:
        return {"href": self.href}


@dataclass(frozen=True)
class Input(Element):
    kind: ClassVar[str] = "input"

    input_type: str = "text"
    name: Optional[str] = None
    id: Optional[str] = None
    placeholder: Optional[str] = None

    def _extra_fields(self) -> Dict:
        return {
            "input_type": self.input_type,
            "name": self.name,
            "id": self.id,
            "placeholder": self.placeholder,
        }


@dataclass(frozen=True)
class Checkbox(Element):
    kind: ClassVar[str] = "checkbox"

    name: Optional[str] = None
    id: Optional[str] = None
    value: Optional[str] = None

    def _extra_fields(self) -> Dict:
        return {"name": self.name, "id": self.id, "value": self.value}


@dataclass(frozen=True)
class Radio(Checkbox):
    kind: ClassVar[str] = "radio"


@dataclass(frozen=True)
class Option:
    """One ``<option>`` of a dropdown."""

    value: Optional[str]
    text: str

    def to_dict(self) -> Dict:
        return {"value": self.value, "text": self.text}


@dataclass(frozen=True)
class Dropdown(Element):
    kind: ClassVar[str] = "dropdown"

    name: Optional[str] = None
    id: Optional[str] = None
    options: Tuple[Option, ...] = ()

    def _extra_fields(self) -> Dict:
        return {
            "name": self.name,
            "id": self.id,
            "options": [option.to_dict() for option in self.options],
        }


@dataclass(frozen=True)
class Form(Element):
    kind: ClassVar[str] = "form"

    id: Optional[str] = None
    action: Optional[str] = None
    method: Optional[str] = None

    def _extra_fields(self) -> Dict:
        return {"id": self.id, "action": self.action, "method": self.method}


@dataclass(frozen=True)
class Interactive(Element):
    kind: ClassVar[str] = "interactive"

    role: Optional[str] = None

    def _extra_fields(self) -> Dict:
        return {"role": self.role}


@dataclass(frozen=True)
class Heading(Element):
    kind: ClassVar[str] = "heading"

    level: int = 1

    def _extra_fields(self) -> Dict:
        return {"level": self.level}


ELEMENT_TYPES: Dict[str, type] = {
    cls.kind: cls
    for cls in (
        Button,
        Link,
        Input,
        Checkbox,
        Radio,
        Dropdown,
        Form,
        Interactive,
        Heading,
    )
}


@dataclass(frozen=True)
class Page:
    """One fetched and analyzed URL."""

    url: str
    title: str
    elements: Tuple[Element, ...] = ()

    @property
    def path(self) -> str:
        return urlparse(self.url).path or "/"

    def elements_of(self, kind: str) -> List[Element]:
        """Return the page's elements of one kind, in extraction order."""
        if kind not in ELEMENT_TYPES:
            raise ValueError(f"Unknown element kind: {kind}")
        return [element for element in self.elements if element.kind == kind]

    def element_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for element in self.elements:
            counts[element.kind] = counts.get(element.kind, 0) + 1
        return counts

    def to_dict(self) -> Dict:
        return {
            "url": self.url,
            "path": self.path,
            "title": self.title,
            "elements": [element.to_dict() for element in self.elements],
        }
