"""Root query fragments."""
