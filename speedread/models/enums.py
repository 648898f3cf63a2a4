"""Enums shared by the engine and the persistence layer."""

from enum import Enum


class ReaderStatus(str, Enum):
    """Lifecycle state of the playback clock."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    COMPLETED = "completed"
