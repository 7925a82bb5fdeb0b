"""Event orchestration for feedback views."""
