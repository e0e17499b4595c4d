"""Terminal adapters."""
