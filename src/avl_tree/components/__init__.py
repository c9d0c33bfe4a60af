"""Rendering components."""
