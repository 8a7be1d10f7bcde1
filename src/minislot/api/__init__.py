"""HTTP API for the minislot deployment server."""
