"""Command-line interface for the Carerix webhooks client."""
