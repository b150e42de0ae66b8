"""Storage bootstrap: table DDL and seed loading for the state and district tables."""
