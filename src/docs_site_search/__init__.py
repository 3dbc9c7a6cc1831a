"""Search subsystem for the internal documentation site."""
