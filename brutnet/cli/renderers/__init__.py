"""Output renderers for the brutnet CLI."""
