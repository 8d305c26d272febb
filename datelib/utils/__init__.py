"""Parsing and coercion of date-like inputs."""
