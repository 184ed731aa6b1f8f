"""Concrete collaborators for the reconciliation core (deck, grid, snapshot)."""
