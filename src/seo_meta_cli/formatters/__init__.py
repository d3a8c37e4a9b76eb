"""Output formatters for generated metadata."""
