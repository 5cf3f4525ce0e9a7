"""Personal finance tracker reporting core."""
