"""Path, metadata, URI and hex helpers."""
