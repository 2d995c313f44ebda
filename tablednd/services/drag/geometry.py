"""Element position and pointer coordinate helpers."""

from typing import NamedTuple, Optional

from tablednd.host import Element, PointerEvent


class Point(NamedTuple):
    """A document coordinate pair."""

    x: float
    y: float


class GeometryProbe:
    """Stateless geometry queries over host elements and pointer events."""

    @staticmethod
    def measured(element: Element) -> Element:
        """Get the element to measure, substituting the first child of a zero-height element."""
        if element.offset_height == 0 and element.first_child is not None:
            return element.first_child
        return element

    @classmethod
    def position(cls, element: Element) -> Point:
        """
        Get the absolute position of an element.

        Walks up the offset-parent chain adding each offset. An element that
        reports zero height (some renderers do this for table rows) is
        measured through its first child instead.

        Args:
            element: Element to measure

        Returns:
            Absolute document position
        """
        element = cls.measured(element)

        left = 0.0
        top = 0.0
        while element.offset_parent is not None:
            left += element.offset_left
            top += element.offset_top
            element = element.offset_parent
        left += element.offset_left
        top += element.offset_top
        return Point(left, top)

    @staticmethod
    def pointer_coords(event: PointerEvent) -> Point:
        """Get the absolute pointer position from an event."""
        if event.page_x or event.page_y:
            return Point(event.page_x or 0, event.page_y or 0)
        return Point(
            event.client_x + event.scroll_left - event.client_left,
            event.client_y + event.scroll_top - event.client_top,
        )

    @classmethod
    def offset_within(cls, element: Optional[Element], event: Optional[PointerEvent]) -> Point:
        """Get the pointer offset from an element's top-left corner."""
        if element is None or event is None:
            return Point(0, 0)
        pointer = cls.pointer_coords(event)
        origin = cls.position(element)
        return Point(pointer.x - origin.x, pointer.y - origin.y)
