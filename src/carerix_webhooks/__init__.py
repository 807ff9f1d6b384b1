"""Command-line client for the Carerix webhooks API."""

__version__ = "0.1.0"
