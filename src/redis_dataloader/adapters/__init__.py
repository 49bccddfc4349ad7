"""Adapters – concrete CacheStore implementations."""
