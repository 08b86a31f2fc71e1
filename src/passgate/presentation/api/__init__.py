"""HTTP API for Passgate."""
