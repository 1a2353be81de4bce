"""Stateless wrappers over the Team Foundation Server REST API."""
