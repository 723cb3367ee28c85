"""Command line interface for metamark."""
