"""HR Pulse - employee sentiment scoring and alert lifecycle."""
