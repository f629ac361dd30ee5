"""Lookup classification, instance resolution and configuration."""
