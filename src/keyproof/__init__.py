"""Challenge-response verifier proving possession of an ES256 private key."""

__version__ = "0.1.0"
