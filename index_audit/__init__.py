"""Audit and remove free-text indexes from a MongoDB database."""
