"""BrutNet command-line interface."""
