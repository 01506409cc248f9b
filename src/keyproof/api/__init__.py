"""HTTP API for the verifier."""
