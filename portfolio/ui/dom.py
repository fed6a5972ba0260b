"""Headless page model the UI units are bound to.

Covers the slice of the browser the page script touches: elements with
classes, attributes and inline style, event dispatch with bubbling, a window
with viewport/scroll/media state, and intersection and mutation observers
whose notifications are driven explicitly (``Document.set_visibility`` and
attribute writes).

Every element is mirrored by a BeautifulSoup tag carrying its name, classes
and attributes, so selector queries run through ``Tag.select``.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Set

from bs4 import BeautifulSoup, Tag

from portfolio.ui.events import Event, EventTarget

FORM_FIELD_TAGS = {"input", "textarea", "select"}

# tags are created detached from here, then attached to a document's soup
_TAG_FACTORY = BeautifulSoup("", "html.parser")

# id of a mirror tag -> the element that owns it
_OWNERS: "weakref.WeakValueDictionary[int, Element]" = weakref.WeakValueDictionary()


def _elements(tags) -> List["Element"]:
    found = (_OWNERS.get(id(tag)) for tag in tags if tag is not None)
    return [element for element in found if element is not None]


@dataclass
class Rect:
    left: float = 0
    top: float = 0
    width: float = 0
    height: float = 0


class ClassList:
    def __init__(self, element: "Element", names=()) -> None:
        self._element = element
        self._names: List[str] = []
        for name in names:
            if name and name not in self._names:
                self._names.append(name)

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def __iter__(self):
        return iter(list(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def contains(self, name: str) -> bool:
        return name in self._names

    def add(self, name: str) -> None:
        if name not in self._names:
            self._names.append(name)
            self._element._attribute_changed("class")

    def remove(self, name: str) -> None:
        if name in self._names:
            self._names.remove(name)
            self._element._attribute_changed("class")

    def toggle(self, name: str) -> bool:
        if name in self._names:
            self.remove(name)
            return False
        self.add(name)
        return True

    @property
    def value(self) -> str:
        return " ".join(self._names)


class Element(EventTarget):
    def __init__(self, tag: str, attributes: Optional[Dict[str, str]] = None, text: str = "") -> None:
        super().__init__()
        attributes = dict(attributes or {})
        self.tag = tag.lower()
        self.soup_tag = _TAG_FACTORY.new_tag(self.tag)
        _OWNERS[id(self.soup_tag)] = self
        self.class_list = ClassList(self, attributes.pop("class", "").split())
        self.attributes: Dict[str, str] = attributes
        self.style: Dict[str, str] = {}
        self.children: List[Element] = []
        self.parent: Optional[Element] = None
        self.document: Optional[Document] = None
        self.text_content = text
        self.disabled = "disabled" in attributes
        self.value = attributes.get("value", "")
        self.default_value = self.value
        self.offset_top = 0
        self.offset_height = 0
        self.rect = Rect()
        self._sync_tag()

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        classes = "".join(f".{name}" for name in self.class_list)
        return f"<Element {self.tag}{ident}{classes}>"

    @property
    def id(self) -> str:
        return self.attributes.get("id", "")

    @property
    def class_name(self) -> str:
        return self.class_list.value

    # attributes

    def get_attribute(self, name: str) -> Optional[str]:
        if name == "class":
            return self.class_name
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes or (name == "class" and len(self.class_list) > 0)

    def set_attribute(self, name: str, value: Any) -> None:
        if name == "class":
            self.class_list = ClassList(self, str(value).split())
        else:
            self.attributes[name] = str(value)
        self._attribute_changed(name)

    def remove_attribute(self, name: str) -> None:
        if self.attributes.pop(name, None) is not None:
            self._attribute_changed(name)

    def _sync_tag(self) -> None:
        attrs = dict(self.attributes)
        if len(self.class_list):
            attrs["class"] = list(self.class_list)
        self.soup_tag.attrs = attrs

    def _attribute_changed(self, name: str) -> None:
        self._sync_tag()
        if self.document is not None:
            self.document._record_mutation(self, name)

    # tree

    def append_child(self, child: "Element") -> "Element":
        if child.parent is not None:
            child.remove()
        child.parent = self
        self.children.append(child)
        self.soup_tag.append(child.soup_tag)
        child._adopt(self.document)
        return child

    def remove(self) -> None:
        if self.parent is not None:
            self.parent.children.remove(self)
            self.parent = None
        self.soup_tag.extract()
        self._adopt(None)

    def _adopt(self, document: Optional["Document"]) -> None:
        for node in self.iter():
            node.document = document

    @property
    def is_connected(self) -> bool:
        node = self
        while node.parent is not None:
            node = node.parent
        return self.document is not None and node is self.document.root

    def iter(self) -> Iterator["Element"]:
        yield self
        for child in list(self.children):
            yield from child.iter()

    def contains(self, other: Optional["Element"]) -> bool:
        node = other
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def query_selector_all(self, selector: str) -> List["Element"]:
        return _elements(self.soup_tag.select(selector))

    def query_selector(self, selector: str) -> Optional["Element"]:
        found = _elements([self.soup_tag.select_one(selector)])
        return found[0] if found else None

    def get_bounding_client_rect(self) -> Rect:
        return self.rect

    # forms

    def form_data(self) -> Dict[str, str]:
        return {
            node.attributes["name"]: node.value
            for node in self.iter()
            if node.tag in FORM_FIELD_TAGS and "name" in node.attributes
        }

    def reset(self) -> None:
        for node in self.iter():
            if node.tag in FORM_FIELD_TAGS:
                node.value = node.default_value

    # events

    def click(self, client_x: float = 0, client_y: float = 0) -> Event:
        return self.dispatch_event(Event("click", client_x=client_x, client_y=client_y))

    def dispatch_event(self, event: Event) -> Event:
        event.target = self
        node: Optional[Element] = self
        while node is not None and not event.propagation_stopped:
            node._fire(event)
            node = node.parent
        if self.document is not None and not event.propagation_stopped:
            self.document._fire(event)
        return event


@dataclass
class IntersectionEntry:
    target: Element
    intersection_ratio: float
    is_intersecting: bool


class IntersectionObserver:
    def __init__(self, document: "Document", callback: Callable[[List[IntersectionEntry], "IntersectionObserver"], Any],
                 threshold: float = 0.0, root_margin: str = "0px") -> None:
        self.document = document
        self.callback = callback
        self.threshold = threshold
        self.root_margin = root_margin
        self.targets: List[Element] = []
        document._intersection_observers.append(self)

    def observe(self, element: Element) -> None:
        if element not in self.targets:
            self.targets.append(element)

    def unobserve(self, element: Element) -> None:
        if element in self.targets:
            self.targets.remove(element)

    def disconnect(self) -> None:
        self.targets.clear()

    def _notify(self, element: Element, ratio: float) -> None:
        if element not in self.targets:
            return
        intersecting = ratio > 0 and ratio >= self.threshold
        self.callback([IntersectionEntry(element, ratio, intersecting)], self)


@dataclass
class MutationRecord:
    type: str
    target: Element
    attribute_name: str


class MutationObserver:
    """Attribute observer. Records are delivered as soon as the write happens."""

    def __init__(self, document: "Document", callback: Callable[[List[MutationRecord], "MutationObserver"], Any]) -> None:
        self.document = document
        self.callback = callback
        self._targets: Dict[int, Optional[Set[str]]] = {}
        document._mutation_observers.append(self)

    def observe(self, element: Element, attributes: bool = True, attribute_filter=None) -> None:
        if attributes:
            self._targets[id(element)] = set(attribute_filter) if attribute_filter else None

    def disconnect(self) -> None:
        self._targets.clear()

    def _notify(self, element: Element, name: str) -> None:
        if id(element) not in self._targets:
            return
        wanted = self._targets[id(element)]
        if wanted is not None and name not in wanted:
            return
        self.callback([MutationRecord("attributes", element, name)], self)


@dataclass
class Location:
    hostname: str = "localhost"
    port: str = ""


class MediaQueryList:
    def __init__(self, query: str, matches: bool) -> None:
        self.media = query
        self.matches = matches


class Window(EventTarget):
    def __init__(self, inner_width: int = 1280, inner_height: int = 800, touch: bool = False,
                 max_touch_points: int = 0, location: Optional[Location] = None,
                 media: Optional[Set[str]] = None) -> None:
        super().__init__()
        self.inner_width = inner_width
        self.inner_height = inner_height
        self.has_touch_events = touch
        self.max_touch_points = max_touch_points
        self.location = location or Location()
        self.media = set(media or ())
        self.scroll_y = 0
        self.scroll_calls: List[Dict[str, Any]] = []
        self.reload_count = 0
        self.globals: Dict[str, Any] = {}

    def match_media(self, query: str) -> MediaQueryList:
        return MediaQueryList(query, query in self.media)

    def scroll_to(self, top: float, behavior: str = "auto") -> None:
        self.scroll_calls.append({"top": top, "behavior": behavior})
        self.scroll_y = top

    def scroll(self, y: float) -> Event:
        self.scroll_y = y
        return self.dispatch_event(Event("scroll"))

    def resize(self, width: int) -> Event:
        self.inner_width = width
        return self.dispatch_event(Event("resize"))

    def reload(self) -> None:
        self.reload_count += 1

    def dispatch_event(self, event: Event) -> Event:
        event.target = self
        self._fire(event)
        return event


class Document(EventTarget):
    def __init__(self, ready_state: str = "complete") -> None:
        super().__init__()
        self.ready_state = ready_state
        self._intersection_observers: List[IntersectionObserver] = []
        self._mutation_observers: List[MutationObserver] = []
        self.soup = BeautifulSoup("", "html.parser")
        self.root = Element("html")
        self.root.document = self
        self.soup.append(self.root.soup_tag)
        self.head = self.root.append_child(Element("head"))
        self.body = self.root.append_child(Element("body"))

    @classmethod
    def from_html(cls, markup: str, ready_state: str = "complete") -> "Document":
        soup = BeautifulSoup(markup, "html.parser")
        document = cls(ready_state=ready_state)
        head = soup.find("head")
        body = soup.find("body")
        if head is not None:
            _copy_children(head, document.head)
        _copy_children(body if body is not None else soup, document.body)
        return document

    def create_element(self, tag: str) -> Element:
        return Element(tag)

    def get_element_by_id(self, ident: str) -> Optional[Element]:
        found = _elements([self.soup.find(id=ident)])
        return found[0] if found else None

    def query_selector_all(self, selector: str) -> List[Element]:
        return _elements(self.soup.select(selector))

    def query_selector(self, selector: str) -> Optional[Element]:
        found = _elements([self.soup.select_one(selector)])
        return found[0] if found else None

    def dispatch_event(self, event: Event) -> Event:
        event.target = self
        self._fire(event)
        return event

    def mark_ready(self) -> None:
        self.ready_state = "interactive"
        self.dispatch_event(Event("DOMContentLoaded"))

    def set_visibility(self, element: Element, ratio: float) -> None:
        """Report how much of element is inside the viewport to every observer."""
        for observer in list(self._intersection_observers):
            observer._notify(element, ratio)

    def _record_mutation(self, element: Element, name: str) -> None:
        for observer in list(self._mutation_observers):
            observer._notify(element, name)


def _copy_children(source: Tag, parent: Element) -> None:
    for child in source.children:
        if not isinstance(child, Tag):
            continue
        attributes = {
            key: " ".join(value) if isinstance(value, list) else (value if value is not None else "")
            for key, value in child.attrs.items()
        }
        direct_text = "".join(s for s in child.find_all(string=True, recursive=False)).strip()
        element = Element(child.name, attributes, text=direct_text)
        if element.tag == "textarea":
            element.value = element.default_value = child.get_text()
        parent.append_child(element)
        _copy_children(child, element)
