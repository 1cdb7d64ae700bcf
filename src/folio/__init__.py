"""folio — content retrieval and recommendation for a services site."""

__version__ = "0.1.0"
