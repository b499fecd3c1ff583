"""Embedding training pipelines."""
