"""descregistry - role-gated account description registry."""

__version__ = "0.1.0"
