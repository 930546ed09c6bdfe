"""Media catalog service: validated entities, repository contracts and storage adapters."""

__version__ = "0.1.0"
