"""Core systems: input, configuration and logging."""
