"""Frame driver: one simulation step plus a render per display tick.

The driver owns the SimulationContext. Each tick advances the paddle and
ball and resolves collisions, but only while the game is playing; the
render callback runs on every tick regardless of state.
"""

from typing import Callable, Optional

from playfield.logging import get_logger

from .context import SimulationContext
from .physics import advance_ball, advance_paddle, resolve_collisions

log = get_logger('breakout.frame_driver')

RenderCallback = Callable[[SimulationContext], None]


class FrameDriver:
    """Ties motion, collisions, and rendering together once per tick."""

    def __init__(
        self,
        context: SimulationContext,
        render: Optional[RenderCallback] = None,
        log_every: int = 600,
    ):
        """Initialize the driver.

        Args:
            context: Simulation state to drive
            render: Called with the context after every tick
            log_every: Ticks between throttled progress log lines
        """
        self.context = context
        self._render = render
        self._log_every = log_every
        self.tick_count = 0

    def set_render(self, render: Optional[RenderCallback]) -> None:
        """Replace the per-tick render callback."""
        self._render = render

    def step(self) -> None:
        """Advance the simulation one tick (no rendering, no state check)."""
        ctx = self.context
        advance_paddle(ctx.paddle, ctx.field.width)
        advance_ball(ctx.ball)
        resolve_collisions(ctx)

    def tick(self) -> None:
        """Run one frame: simulate if playing, then render."""
        ctx = self.context
        if ctx.machine.is_playing:
            self.step()

        if self._render is not None:
            self._render(ctx)

        self.tick_count += 1
        log.trace(
            "tick %d state=%s ball=(%.1f, %.1f) v=(%.2f, %.2f)",
            self.tick_count, ctx.state.value,
            ctx.ball.x, ctx.ball.y, ctx.ball.dx, ctx.ball.dy,
        )
        if self._log_every and self.tick_count % self._log_every == 0:
            log.debug(
                "tick %d | state=%s score=%d lives=%d bricks=%d",
                self.tick_count, ctx.state.value, ctx.score, ctx.lives,
                ctx.bricks.remaining,
            )

    def run(
        self,
        schedule: Callable[[], object],
        keep_running: Callable[[], bool] = lambda: True,
        max_frames: Optional[int] = None,
    ) -> int:
        """Cooperative loop: tick, then wait for the host's next frame.

        Args:
            schedule: Blocks until the next frame is due (e.g. Clock.tick)
            keep_running: Checked before each tick; False ends the loop
            max_frames: Stop after this many ticks (None = no limit)

        Returns:
            Number of ticks run by this call
        """
        frames = 0
        while True:
            if max_frames is not None and frames >= max_frames:
                log.info("Reached max frames (%d)", max_frames)
                break
            if not keep_running():
                break
            self.tick()
            frames += 1
            schedule()
        return frames
