"""Operational scripts for Vistagram."""
