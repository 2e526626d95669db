"""Observability helpers (structured logging, stage context, workflow groups)."""
