"""Bind data to plain HTML templates."""
