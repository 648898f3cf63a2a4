"""HTTP API for the speed-reading engine."""
