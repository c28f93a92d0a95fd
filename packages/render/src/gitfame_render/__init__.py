"""Output renderers for ranked contributor statistics."""
