"""Command line tools shipped with the verifier."""
