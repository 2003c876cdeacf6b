"""Data-transfer objects exposed over HTTP."""
