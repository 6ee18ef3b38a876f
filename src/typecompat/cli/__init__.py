"""typecompat command-line interface."""
