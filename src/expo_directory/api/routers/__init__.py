"""Route modules. Each exposes a module-level ``router``."""
