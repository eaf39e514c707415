"""Tests for the FrameDriver tick loop."""

import random

import pytest

from models import InputAction
from playfield.games.input import InputEvent
from games.Breakout.config import BreakoutSettings
from games.Breakout.game.context import SimulationContext
from games.Breakout.game.frame_driver import FrameDriver
from games.Breakout.game.state_machine import BreakoutState
from games.Breakout.tests.conftest import RecordingSink, place_ball


@pytest.fixture
def rendered():
    return []


@pytest.fixture
def driver(ctx, rendered):
    return FrameDriver(ctx, render=rendered.append)


class TestTick:
    """Simulation only advances while playing; rendering always runs."""

    @pytest.mark.parametrize("paused", [False, True])
    def test_idle_states_freeze_ball(self, driver, ctx, rendered, paused):
        if paused:
            ctx.machine.transition(BreakoutState.PLAYING)
            ctx.machine.transition(BreakoutState.PAUSED)
        place_ball(ctx, 400, 300, dx=4, dy=-4)
        ctx.paddle.dx = 8

        for _ in range(5):
            driver.tick()

        assert (ctx.ball.x, ctx.ball.y) == (400, 300)
        assert ctx.paddle.x == 350
        assert len(rendered) == 5

    def test_playing_moves_ball(self, driver, ctx):
        ctx.machine.transition(BreakoutState.PLAYING)
        place_ball(ctx, 400, 300, dx=4, dy=-4)
        driver.tick()
        assert (ctx.ball.x, ctx.ball.y) == (404, 296)

    def test_render_receives_context(self, driver, ctx, rendered):
        driver.tick()
        assert rendered == [ctx]

    def test_tick_without_render(self, ctx):
        driver = FrameDriver(ctx)
        driver.tick()
        assert driver.tick_count == 1

    def test_set_render_replaces_callback(self, driver, rendered):
        other = []
        driver.set_render(other.append)
        driver.tick()
        assert rendered == []
        assert len(other) == 1

    def test_terminal_state_still_renders(self, driver, ctx, rendered):
        ctx.lives = 1
        ctx.machine.transition(BreakoutState.PLAYING)
        ctx.lose_life()
        driver.tick()
        assert ctx.state == BreakoutState.LOSE
        assert len(rendered) == 1


class TestRun:
    """Cooperative loop with an injected scheduler."""

    def test_max_frames(self, driver, rendered):
        waits = []
        frames = driver.run(lambda: waits.append(1), max_frames=7)
        assert frames == 7
        assert len(waits) == 7
        assert len(rendered) == 7

    def test_keep_running_stops_loop(self, driver):
        answers = iter([True, True, True, False])
        frames = driver.run(lambda: None, keep_running=lambda: next(answers))
        assert frames == 3

    def test_zero_frames(self, driver, rendered):
        assert driver.run(lambda: None, max_frames=0) == 0
        assert rendered == []

    def test_keep_running_not_consulted_after_last_frame(self, driver):
        checks = []

        def keep_running():
            checks.append(1)
            return True

        frames = driver.run(lambda: None, keep_running=keep_running, max_frames=4)
        assert frames == 4
        assert len(checks) == 4


class TestFullGame:
    """Long deterministic runs keep the documented invariants."""

    @pytest.mark.parametrize("seed", [1, 7, 42])
    def test_invariants_hold(self, seed):
        rng = random.Random(seed)
        ctx = SimulationContext(
            BreakoutSettings(seed=seed), sink=RecordingSink(), rng=rng,
        )
        driver = FrameDriver(ctx)
        actions = [InputAction.MOVE_LEFT, InputAction.MOVE_RIGHT]

        for frame in range(3000):
            if ctx.state == BreakoutState.READY:
                ctx.apply_input(InputEvent.key_down(InputAction.TOGGLE_PAUSE, frame))
            if frame % 40 == 0:
                ctx.apply_input(InputEvent.key_down(rng.choice(actions), frame))
            if frame % 97 == 0:
                ctx.apply_input(InputEvent.pointer(ctx.ball.x, 0, frame))

            driver.tick()

            assert 0 <= ctx.paddle.x <= ctx.field.width - ctx.paddle.width
            assert 0 <= ctx.score <= ctx.win_score
            assert ctx.score % 10 == 0
            assert 0 <= ctx.lives <= 3
            assert ctx.score == 10 * (45 - ctx.bricks.remaining)
            if ctx.state.is_terminal:
                break

    def test_tracking_paddle_never_loses(self):
        """A paddle that follows the ball keeps every life."""
        ctx = SimulationContext(BreakoutSettings(seed=3), rng=random.Random(3))
        driver = FrameDriver(ctx)
        ctx.machine.transition(BreakoutState.PLAYING)

        for frame in range(2000):
            ctx.apply_input(InputEvent.pointer(ctx.ball.x, 0, frame))
            driver.tick()
            if ctx.state.is_terminal:
                break

        assert ctx.lives == 3
        assert ctx.score > 0
