"""Business logic services for the speed-reading engine."""
