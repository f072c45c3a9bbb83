"""Root mutation fragments."""
