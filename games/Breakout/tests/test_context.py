"""Tests for SimulationContext: scoring, lives, restart, input."""

import pytest

from models import InputAction
from playfield.games.input import InputEvent
from games.Breakout.config import BreakoutSettings
from games.Breakout.game.context import SimulationContext
from games.Breakout.game.physics import resolve_collisions
from games.Breakout.game.state_machine import BreakoutState
from games.Breakout.tests.conftest import RecordingSink, place_ball


class TestCreation:
    """Initial state and display notifications."""

    def test_defaults(self, ctx):
        assert ctx.score == 0
        assert ctx.lives == 3
        assert ctx.state == BreakoutState.READY
        assert ctx.message is None
        assert ctx.win_score == 450

    def test_sink_receives_initial_values(self, sink, ctx):
        assert sink.scores == [0]
        assert sink.lives == [3]

    def test_lives_from_settings(self, sink):
        ctx = SimulationContext(BreakoutSettings(lives=5), sink=sink)
        assert ctx.lives == 5

    def test_seeded_launch_is_repeatable(self):
        first = SimulationContext(BreakoutSettings(seed=99))
        second = SimulationContext(BreakoutSettings(seed=99))
        assert first.ball.dx == second.ball.dx


class TestScoring:
    """destroy_brick is idempotent."""

    def test_destroy_awards_points(self, ctx, sink):
        assert ctx.destroy_brick(ctx.bricks[2, 3])
        assert ctx.score == 10
        assert sink.scores[-1] == 10

    def test_destroy_twice_scores_once(self, ctx):
        brick = ctx.bricks[2, 3]
        ctx.destroy_brick(brick)
        assert not ctx.destroy_brick(brick)
        assert ctx.score == 10

    def test_clearing_board_scores_exact_total(self, playing_ctx):
        for brick in playing_ctx.bricks:
            playing_ctx.destroy_brick(brick)
        assert playing_ctx.score == 5 * 9 * 10
        assert playing_ctx.check_win()
        assert playing_ctx.state == BreakoutState.WIN


class TestLives:
    """lose_life bookkeeping."""

    def test_lives_count_down_to_lose(self, playing_ctx, sink):
        playing_ctx.lose_life()
        assert playing_ctx.state == BreakoutState.READY
        playing_ctx.machine.toggle_pause()
        playing_ctx.lose_life()
        playing_ctx.machine.toggle_pause()
        playing_ctx.lose_life()

        assert playing_ctx.lives == 0
        assert playing_ctx.state == BreakoutState.LOSE
        assert sink.lives == [3, 2, 1, 0]
        assert sink.last_message[1] == 'lose'


class TestRestart:
    """Restart resets everything regardless of prior state."""

    def _lose_game(self, ctx):
        ctx.lives = 1
        place_ball(ctx, 100, 597, dx=4, dy=4)
        resolve_collisions(ctx)
        assert ctx.state == BreakoutState.LOSE

    def test_restart_after_loss(self, playing_ctx, sink):
        playing_ctx.destroy_brick(playing_ctx.bricks[0, 0])
        playing_ctx.paddle.x = 0
        playing_ctx.paddle.dx = -8
        self._lose_game(playing_ctx)

        playing_ctx.restart()

        assert playing_ctx.score == 0
        assert playing_ctx.lives == 3
        assert playing_ctx.state == BreakoutState.READY
        assert playing_ctx.bricks.remaining == 45
        assert playing_ctx.message is None
        assert playing_ctx.paddle.x == 350
        assert playing_ctx.paddle.dx == 0
        assert (playing_ctx.ball.x, playing_ctx.ball.y) == (400, 300)
        assert sink.hidden == 1
        assert sink.scores[-1] == 0
        assert sink.lives[-1] == 3

    @pytest.mark.parametrize("state", [
        BreakoutState.READY,
        BreakoutState.PLAYING,
        BreakoutState.PAUSED,
    ])
    def test_restart_from_live_states(self, ctx, state):
        if state != BreakoutState.READY:
            ctx.machine.transition(BreakoutState.PLAYING)
        if state == BreakoutState.PAUSED:
            ctx.machine.transition(BreakoutState.PAUSED)
        ctx.destroy_brick(ctx.bricks[1, 1])
        ctx.restart()
        assert ctx.state == BreakoutState.READY
        assert ctx.score == 0
        assert ctx.bricks.remaining == 45

    def test_restart_after_win(self, playing_ctx):
        for brick in playing_ctx.bricks:
            playing_ctx.destroy_brick(brick)
        playing_ctx.check_win()
        playing_ctx.restart()
        assert playing_ctx.state == BreakoutState.READY
        assert playing_ctx.bricks.remaining == 45
        assert playing_ctx.message is None


class TestInput:
    """apply_input maps actions onto the paddle and state machine."""

    def test_move_keys_set_velocity(self, ctx):
        ctx.apply_input(InputEvent.key_down(InputAction.MOVE_LEFT, 0.0))
        assert ctx.paddle.dx == -8
        ctx.apply_input(InputEvent.key_down(InputAction.MOVE_RIGHT, 0.1))
        assert ctx.paddle.dx == 8

    def test_key_up_stops(self, ctx):
        ctx.apply_input(InputEvent.key_down(InputAction.MOVE_RIGHT, 0.0))
        ctx.apply_input(InputEvent.key_up(InputAction.MOVE_RIGHT, 0.1))
        assert ctx.paddle.dx == 0

    def test_toggle_pause(self, ctx):
        ctx.apply_input(InputEvent.key_down(InputAction.TOGGLE_PAUSE, 0.0))
        assert ctx.state == BreakoutState.PLAYING
        ctx.apply_input(InputEvent.key_down(InputAction.TOGGLE_PAUSE, 0.1))
        assert ctx.state == BreakoutState.PAUSED

    def test_toggle_key_up_ignored(self, ctx):
        ctx.apply_input(InputEvent.key_up(InputAction.TOGGLE_PAUSE, 0.0))
        assert ctx.state == BreakoutState.READY

    def test_pointer_moves_paddle(self, ctx):
        ctx.apply_input(InputEvent.pointer(100, 300, 0.0))
        assert ctx.paddle.x == 50
        ctx.apply_input(InputEvent.pointer(-40, 300, 0.1))
        assert ctx.paddle.x == 0

    def test_restart_key(self, playing_ctx):
        playing_ctx.destroy_brick(playing_ctx.bricks[0, 0])
        playing_ctx.apply_input(InputEvent.key_down(InputAction.RESTART, 0.0))
        assert playing_ctx.score == 0
        assert playing_ctx.state == BreakoutState.READY

    def test_independent_contexts(self):
        """Two games never share state."""
        first = SimulationContext(sink=RecordingSink())
        second = SimulationContext(sink=RecordingSink())
        first.destroy_brick(first.bricks[0, 0])
        assert second.score == 0
        assert second.bricks[0, 0].visible


class TestSoundHooks:
    """Sound cues fire once per event."""

    def test_brick_break_cue(self, ctx, sink):
        brick = ctx.bricks[0, 0]
        ctx.destroy_brick(brick)
        ctx.destroy_brick(brick)
        assert sink.brick_breaks == 1

    def test_life_lost_cue(self, playing_ctx, sink):
        playing_ctx.lose_life()
        assert sink.lives_lost == 1
