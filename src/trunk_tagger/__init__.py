"""Idempotent trunk/<sha> tagging for commits landing on the main branch."""
