"""Adapters connecting the core helpers to a store, a translator, and the CLI."""
