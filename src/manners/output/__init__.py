"""Output formatting for the manners CLI."""
