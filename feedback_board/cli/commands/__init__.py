"""Command modules for the Feedback Board CLI."""
