"""Domain layer - tables, rows and the statement descriptor."""
