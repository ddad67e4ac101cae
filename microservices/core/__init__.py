"""Core business logic: job tracking, chunk processing and domain exceptions."""
