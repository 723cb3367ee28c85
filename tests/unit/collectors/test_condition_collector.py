"""Tests for predicate-driven and no-op collectors."""

from metamark import collectors
from metamark.collectors import ConditionCollector, ContainerInfo, NoneCollector
from tests.fakes import Inner, Middle, Outer, Step, StepList


class TestConditionCollector:
    """Tests for ConditionCollector."""

    def test_full_accepts_any_marker_sequence(self):
        """full() treats any marker-sequence field as a container."""
        collector = collectors.full()

        assert collector.container_info(StepList) == ContainerInfo(StepList, Step, "steps")
        assert collector.repeated_type(Outer) is Middle

    def test_predicate_filters(self):
        """Only fields accepted by the predicate qualify."""
        collector = collectors.condition(
            lambda container, name, element: container.__name__.endswith("List")
        )

        assert collector.is_container(StepList)
        assert not collector.is_container(Outer)

    def test_predicate_arguments(self):
        """The predicate receives container type, field name and element type."""
        calls = []

        def record(container, name, element):
            calls.append((container, name, element))
            return False

        ConditionCollector(record).container_info(Middle)

        assert calls == [(Middle, "value", Inner)]

    def test_extract(self):
        """Extraction reads the qualifying field in order."""
        steps = collectors.full().extract(StepList((Step("build"), Step("test"))))

        assert [s.name for s in steps] == ["build", "test"]

    def test_extract_unreadable(self):
        """A non-sequence value degrades to no contained markers."""
        assert collectors.full().extract(StepList(None)) == []

    def test_condition_creates_new_instances(self):
        """condition() builds a fresh collector per call."""
        predicate = lambda *args: True  # noqa: E731

        assert collectors.condition(predicate) is not collectors.condition(predicate)


class TestNoneCollector:
    """Tests for NoneCollector."""

    def test_never_container(self):
        """none() never reports a container."""
        collector = collectors.none()

        assert isinstance(collector, NoneCollector)
        assert not collector.is_container(Outer)
        assert collector.extract(Outer((Middle(),))) == []

    def test_final_markers_are_self(self):
        """Without containers, final expansion is the marker itself."""
        outer = Outer((Middle(),))

        assert collectors.none().get_final_repeatable_markers(outer) == [outer]
