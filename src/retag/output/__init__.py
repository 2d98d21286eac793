"""User-facing console output."""
