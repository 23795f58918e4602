"""HTTP API for Vistagram."""
