"""Vault history commands."""
