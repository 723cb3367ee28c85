"""Tests for marker declaration and attachment."""

import pytest

from metamark import (
    Marker,
    MarkerDefinitionError,
    Repeatable,
    RepeatableGroup,
    declared_markers,
    is_marker_type,
    marker,
)
from metamark.model.markers import attach
from tests.fakes import Documented, Inner, Middle, Nested, Outer, Ping, Pong


class TestMarkerValues:
    """Tests for marker equality and attributes."""

    def test_equal_by_type_and_values(self):
        """Markers with the same type and values are equal."""
        assert Inner("c1") == Inner("c1")
        assert hash(Inner("c1")) == hash(Inner("c1"))
        assert Inner("c1") != Inner("c2")

    def test_different_types_not_equal(self):
        """Markers of different types are never equal."""
        assert Ping() != Pong()

    def test_immutable(self):
        """Markers are frozen."""
        inner = Inner("c1")
        with pytest.raises(AttributeError):
            inner.label = "other"

    def test_attributes_in_declaration_order(self):
        """attributes() lists fields in declaration order."""
        middle = Middle((Inner("c1"),), "b1")

        assert list(middle.attributes()) == ["value", "name"]
        assert middle.attributes()["name"] == "b1"

    def test_marker_type(self):
        """marker_type is the marker's class."""
        assert Outer().marker_type is Outer


class TestMarkerDecorator:
    """Tests for @marker."""

    def test_rejects_non_marker_class(self):
        """@marker requires a Marker subclass."""
        with pytest.raises(MarkerDefinitionError):

            @marker
            class NotAMarker:
                pass

    def test_is_marker_type(self):
        """is_marker_type recognizes marker classes only."""
        assert is_marker_type(Outer)
        assert not is_marker_type(Outer())
        assert not is_marker_type(int)


class TestAttachment:
    """Tests for attaching markers to elements."""

    def test_declared_order_top_to_bottom(self):
        """Stacked decorators keep source order."""

        @Ping()
        @Pong()
        def handler():
            pass

        assert declared_markers(handler) == (Ping(), Pong())

    def test_decorator_returns_target(self):
        """Applying a marker returns the decorated object unchanged."""

        def handler():
            return 42

        assert Ping()(handler) is handler
        assert handler() == 42

    def test_not_inherited(self):
        """Markers on a base class are not directly present on subclasses."""

        class Child(Nested):
            pass

        assert declared_markers(Child) == ()
        assert len(declared_markers(Nested)) == 1

    def test_unmarked_object(self):
        """Objects without markers or a namespace have none."""
        assert declared_markers(object()) == ()
        assert declared_markers(5) == ()

    def test_attach_to_object_without_namespace(self):
        """Attaching to an object that cannot hold attributes fails."""
        with pytest.raises(MarkerDefinitionError):
            attach(5, Ping())

    def test_attach_requires_marker(self):
        """Only marker instances can be attached."""

        def handler():
            pass

        with pytest.raises(MarkerDefinitionError):
            attach(handler, "not a marker")

    def test_meta_markers_on_marker_type(self):
        """Marker types carry their meta-markers, system markers included."""
        assert declared_markers(Middle) == (Documented(), Repeatable(Outer))


class TestSystemMarkers:
    """Tests for Repeatable and RepeatableGroup."""

    def test_system_flag(self):
        """Built-in repeatability markers are system markers."""
        assert Repeatable(Outer).system is True
        assert RepeatableGroup(Inner).system is True
        assert Documented().system is False

    def test_repeatable_requires_marker_type(self):
        """Repeatable must name a marker type."""
        with pytest.raises(MarkerDefinitionError):
            Repeatable(int)

    def test_repeatable_group_requires_marker_type(self):
        """RepeatableGroup must name a marker type."""
        with pytest.raises(MarkerDefinitionError):
            RepeatableGroup(str)

    def test_repeatable_group_default_attribute(self):
        """RepeatableGroup reads 'value' by default."""
        assert RepeatableGroup(Inner).attribute == "value"

    def test_marker_base_is_marker(self):
        """The base class is itself a marker type."""
        assert is_marker_type(Marker)
