"""
Playback package: the timed state machine that drives RSVP display.

- scheduler: cancellable single-shot callbacks (asyncio and simulated)
- clock: PlaybackClock and its state snapshots
"""

from speedread.services.tokenizer.timing import PlaybackConfig

from .clock import PlaybackClock, PlaybackState, StateListener
from .scheduler import (
    AsyncioScheduler,
    ManualScheduler,
    ManualTask,
    ScheduledTask,
    Scheduler,
)

__all__ = [
    "PlaybackClock",
    "PlaybackConfig",
    "PlaybackState",
    "StateListener",
    "Scheduler",
    "ScheduledTask",
    "AsyncioScheduler",
    "ManualScheduler",
    "ManualTask",
]
