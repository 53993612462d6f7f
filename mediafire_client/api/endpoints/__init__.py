"""Typed wrappers around individual MediaFire API endpoints."""
