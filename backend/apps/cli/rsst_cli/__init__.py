"""rsst command-line application."""
