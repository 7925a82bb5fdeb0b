"""Feedback Board: ratings-and-comments collection with derived views."""
