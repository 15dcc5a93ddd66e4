"""Solar System: a read-only planet catalogue served with FastAPI."""
