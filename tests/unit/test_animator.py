"""Unit tests for the race animator."""

import pytest

from racechart.data.frames import build_frames, entity_universe
from racechart.data.records import Entry, Frame, Record
from racechart.visuals.anims.animator import AnimatorState, RaceAnimator, format_value
from racechart.visuals.anims.surface import BAR, LABEL, VALUE_LABEL
from racechart.visuals.core.config import RaceConfig


@pytest.fixture
def frames(example_records):
    return build_frames(example_records)


class TestTick:
    """Tests for a single tick."""

    def test_starts_idle(self, frames, surface):
        animator = RaceAnimator(frames, surface)
        assert animator.state is AnimatorState.IDLE
        assert animator.cursor is None

    def test_first_tick_renders_frame_zero(self, frames, surface):
        animator = RaceAnimator(frames, surface)
        assert animator.tick() is frames[0]
        assert animator.state is AnimatorState.PLAYING
        assert animator.cursor == 1
        assert surface.time_label == "2020-01"
        for family in (BAR, LABEL, VALUE_LABEL):
            assert surface.keys(family) == ["A", "B"]

    def test_geometry(self, frames, surface):
        config = RaceConfig()
        animator = RaceAnimator(frames, surface, config)
        animator.tick()
        bar_a = surface.elements[BAR]["A"]
        bar_b = surface.elements[BAR]["B"]
        assert bar_a["x"] == 0.0
        assert bar_a["width"] == surface.plot_width
        assert bar_b["width"] == pytest.approx(surface.plot_width / 2)
        assert bar_a["y"] < bar_b["y"]
        assert bar_a["height"] == pytest.approx(animator.y.bandwidth)

        label = surface.elements[LABEL]["B"]
        assert label["x"] == -config.label_offset
        assert label["anchor"] == "end"
        assert label["text"] == "B"
        assert label["y"] == pytest.approx(bar_b["y"] + bar_b["height"] / 2)

        value_label = surface.elements[VALUE_LABEL]["B"]
        assert value_label["text"] == "5"
        assert value_label["x"] == pytest.approx(
            surface.plot_width / 2 + config.value_label_offset
        )

    def test_value_axis_rescales_per_frame(self, frames, surface):
        animator = RaceAnimator(frames, surface)
        animator.tick()
        animator.tick()
        # frame 2 max is A=3, so A spans the full width again
        assert surface.elements[BAR]["A"]["width"] == surface.plot_width
        assert surface.elements[BAR]["B"]["width"] == 0
        assert surface.elements[VALUE_LABEL]["A"]["text"] == "3"

    def test_rank_change_moves_same_element(self, surface):
        frames = [
            Frame("t1", (Entry("A", 2.0), Entry("B", 1.0))),
            Frame("t2", (Entry("B", 4.0), Entry("A", 3.0))),
        ]
        animator = RaceAnimator(frames, surface)
        animator.tick()
        top = surface.elements[BAR]["A"]["y"]
        animator.tick()
        assert surface.elements[BAR]["B"]["y"] == top
        creates = [c for c in surface.calls if c[0] == "create"]
        assert len(creates) == 6  # three families, two entities, created once

    def test_transitions_use_configured_duration(self, frames, surface):
        config = RaceConfig(transition_duration=0.4)
        animator = RaceAnimator(frames, surface, config)
        animator.tick()
        animator.tick()
        assert surface.durations
        assert set(surface.durations) == {0.4}

    def test_missing_entity_is_removed(self, surface):
        frames = [
            Frame("t1", (Entry("A", 2.0), Entry("B", 1.0))),
            Frame("t2", (Entry("A", 3.0),)),
        ]
        animator = RaceAnimator(frames, surface)
        animator.tick()
        animator.tick()
        for family in (BAR, LABEL, VALUE_LABEL):
            assert surface.keys(family) == ["A"]
            assert ("remove", family, "B") in surface.calls


class TestPlayback:
    """Tests for cyclic playback and colors."""

    def test_cursor_wraps_after_frame_count_ticks(self, surface):
        records = [Record(f"t{i}", "A", float(i)) for i in range(5)]
        frames = build_frames(records)
        animator = RaceAnimator(frames, surface)
        rendered = [animator.tick().time_key for _ in range(len(frames))]
        assert rendered == [f.time_key for f in frames]
        assert animator.cursor == 0
        assert animator.tick() is frames[0]

    def test_colors_are_stable(self, surface):
        frames = [
            Frame("t1", (Entry("A", 2.0), Entry("B", 1.0))),
            Frame("t2", (Entry("B", 4.0), Entry("A", 3.0))),
            Frame("t3", (Entry("A", 5.0), Entry("B", 4.0))),
        ]
        animator = RaceAnimator(frames, surface, entities=["A", "B"])
        seen = {"A": set(), "B": set()}
        for _ in range(6):
            animator.tick()
            for key in seen:
                seen[key].add(surface.elements[BAR][key]["fill"])
                seen[key].add(animator.colors(key))
        assert len(seen["A"]) == 1
        assert len(seen["B"]) == 1
        assert seen["A"] != seen["B"]

    def test_color_domain_uses_given_universe(self, frames, surface):
        animator = RaceAnimator(frames, surface, entities=["B", "A"])
        assert animator.colors.domain == ["B", "A"]

    def test_color_domain_defaults_to_first_frame_ranking(self, surface):
        frames = [
            Frame("t1", (Entry("B", 4.0), Entry("A", 3.0))),
            Frame("t2", (Entry("A", 5.0), Entry("B", 1.0))),
        ]
        animator = RaceAnimator(frames, surface)
        assert animator.colors.domain == ["B", "A"]

    def test_first_appearance_order_needs_entity_universe(self, surface):
        records = [
            Record("t1", "A", 1.0),
            Record("t1", "B", 2.0),
        ]
        frames = build_frames(records)
        assert RaceAnimator(frames, surface).colors.domain == ["B", "A"]
        animator = RaceAnimator(frames, surface, entities=entity_universe(records))
        assert animator.colors.domain == ["A", "B"]

    def test_empty_frames_are_a_no_op(self, surface):
        animator = RaceAnimator([], surface)
        for _ in range(3):
            assert animator.tick() is None
        assert animator.state is AnimatorState.IDLE
        assert surface.calls == []


class TestLifecycle:
    """Tests for start/stop."""

    def test_start_renders_and_registers(self, frames, surface, timer):
        animator = RaceAnimator(frames, surface)
        animator.start(timer)
        assert animator.is_running
        assert timer.running
        assert animator.cursor == 1
        timer.fire()
        assert animator.cursor == 0

    def test_stop_releases_timer(self, frames, surface, timer):
        animator = RaceAnimator(frames, surface)
        animator.start(timer)
        animator.stop()
        animator.stop()
        assert not animator.is_running
        assert not timer.running
        assert timer.callbacks == []

    def test_companions_follow_lifecycle(self, frames, surface, timer, redraw_timer):
        redraw = redraw_timer
        animator = RaceAnimator(frames, surface)
        animator.start(timer, redraw)
        assert redraw.running
        animator.stop()
        assert not redraw.running

    def test_context_manager_stops(self, frames, surface, timer):
        with RaceAnimator(frames, surface) as animator:
            animator.start(timer)
        assert not timer.running

    def test_double_start_rejected(self, frames, surface, timer):
        animator = RaceAnimator(frames, surface)
        animator.start(timer)
        with pytest.raises(RuntimeError):
            animator.start(timer)

    def test_restart_keeps_cursor(self, surface, timer):
        frames = build_frames([Record(f"t{i}", "A", 1.0) for i in range(4)])
        animator = RaceAnimator(frames, surface)
        animator.start(timer)
        animator.stop()
        animator.start(timer)
        assert animator.cursor == 2

    def test_start_with_no_frames(self, surface, timer):
        animator = RaceAnimator([], surface)
        animator.start(timer)
        timer.fire()
        assert animator.current is None


@pytest.mark.parametrize(
    "value, text",
    [(10.0, "10"), (2.5, "2.5"), (0.0, "0"), (float("nan"), "NaN")],
)
def test_format_value(value, text):
    assert format_value(value) == text
