"""Document text extraction adapters."""
