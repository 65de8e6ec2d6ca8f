"""Rate limiter adapters."""
