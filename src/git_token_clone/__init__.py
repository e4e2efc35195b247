"""Clone or fast-forward-pull one HTTPS repository with a non-interactive token."""

__version__ = "0.1.0"
