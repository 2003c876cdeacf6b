"""Infrastructure concerns: configuration, database, logging and wiring."""
