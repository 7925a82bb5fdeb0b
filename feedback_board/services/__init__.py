"""Services operating on the feedback collection."""
