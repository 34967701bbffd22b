"""Runtime settings and user-facing messages for rps-naming."""
