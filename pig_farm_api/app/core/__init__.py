"""Settings, logging, errors and storage for the application."""
