"""Books API: response schemas."""
