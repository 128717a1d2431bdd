"""Domain models: flag sets, modes, rule tables and verdicts."""
