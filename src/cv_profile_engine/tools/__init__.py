"""External collaborators used by the engine."""
