"""Output layer — human (Rich), quiet and JSON renderings of ServiceResult."""
