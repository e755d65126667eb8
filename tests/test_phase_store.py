"""
Unit Tests for Phase Store

Test coverage for:
- Phase creation and insertion order
- Lookup by ID and by name
- Task index lookup
- Primitive mutation (no validation)
- Previous/next navigation
"""

import pytest

from phase_tracker.phase_store import PhaseStore


@pytest.fixture
def three_phases(store):
    """Create phases A, B, C in that order."""
    return [store.create_phase(name, f"{name} phase") for name in ("A", "B", "C")]


class TestCreatePhase:
    """Test phase creation."""

    def test_new_phase_is_empty_and_not_done(self, store):
        phase = store.create_phase("Foundation", "Set up")

        assert phase.name == "Foundation"
        assert phase.description == "Set up"
        assert phase.tasks == []
        assert phase.done is False
        assert len(phase.phase_id) == 8

    def test_insertion_order_is_preserved(self, store, three_phases):
        assert list(store.get_all()) == [p.phase_id for p in three_phases]
        assert [p.name for p in store.get_all().values()] == ["A", "B", "C"]

    def test_store_does_not_check_names(self, store):
        """Uniqueness is a service rule, not a store rule."""
        store.create_phase("Same", "one")
        store.create_phase("Same", "two")
        assert len(store) == 2


class TestGetAll:
    """Test the read-only view."""

    def test_view_is_read_only(self, store, three_phases):
        view = store.get_all()
        with pytest.raises(TypeError):
            view["new"] = three_phases[0]

    def test_view_reflects_later_phases(self, store):
        view = store.get_all()
        store.create_phase("Late", "added after view")
        assert len(view) == 1


class TestLookups:
    """Test lookup by ID, name and task ID."""

    def test_get_by_phase_id(self, store, three_phases):
        assert store.get_by_phase_id(three_phases[1].phase_id) is three_phases[1]
        assert store.get_by_phase_id("missing") is None

    def test_get_by_name_is_case_sensitive(self, store, three_phases):
        assert store.get_by_name("B") is three_phases[1]
        assert store.get_by_name("b") is None

    def test_contains(self, store, three_phases):
        assert three_phases[0].phase_id in store
        assert "missing" not in store

    def test_get_task_index(self, store, three_phases):
        phase_id = three_phases[0].phase_id
        first = store.add_task(phase_id, "first", "1")
        second = store.add_task(phase_id, "second", "2")

        assert store.get_task_index(phase_id, first.task_id) == 0
        assert store.get_task_index(phase_id, second.task_id) == 1

    def test_get_task_index_not_found(self, store, three_phases):
        assert store.get_task_index(three_phases[0].phase_id, "missing") is None
        assert store.get_task_index("missing", "missing") is None


class TestMutation:
    """Test primitive mutation."""

    def test_add_task_appends_incomplete_task(self, store, three_phases):
        phase = three_phases[0]
        task = store.add_task(phase.phase_id, "Write", "Write it")

        assert phase.tasks == [task]
        assert task.completed is False

    def test_mark_task_completed_sets_flag_both_ways(self, store, three_phases):
        phase = three_phases[0]
        store.add_task(phase.phase_id, "Write", "Write it")

        store.mark_task_completed(phase.phase_id, 0, True)
        assert phase.tasks[0].completed is True

        store.mark_task_completed(phase.phase_id, 0, False)
        assert phase.tasks[0].completed is False

    def test_mark_task_completed_does_not_touch_done(self, store, three_phases):
        phase = three_phases[0]
        store.add_task(phase.phase_id, "Write", "Write it")
        store.mark_task_completed(phase.phase_id, 0, True)
        assert phase.done is False

    def test_set_phase_done(self, store, three_phases):
        store.set_phase_done(three_phases[2].phase_id, True)
        assert three_phases[2].done is True


class TestNavigation:
    """Test previous/next phase lookup."""

    def test_previous_phase(self, store, three_phases):
        a, b, c = three_phases
        assert store.get_previous_phase_id(a.phase_id) is None
        assert store.get_previous_phase_id(b.phase_id) == a.phase_id
        assert store.get_previous_phase_id(c.phase_id) == b.phase_id

    def test_next_phase(self, store, three_phases):
        a, b, c = three_phases
        assert store.get_next_phase_id(a.phase_id) == b.phase_id
        assert store.get_next_phase_id(b.phase_id) == c.phase_id
        assert store.get_next_phase_id(c.phase_id) is None

    def test_unknown_phase_has_no_neighbours(self, store, three_phases):
        assert store.get_previous_phase_id("missing") is None
        assert store.get_next_phase_id("missing") is None

    def test_single_phase_has_no_neighbours(self, store):
        phase = store.create_phase("Only", "alone")
        assert store.get_previous_phase_id(phase.phase_id) is None
        assert store.get_next_phase_id(phase.phase_id) is None
