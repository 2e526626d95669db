"""GitHub Actions runtime surface: inputs, workflow commands and outputs."""
