"""Command implementations for the valrules CLI."""
