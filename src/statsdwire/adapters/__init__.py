"""Adapters connecting the core to logging and line sinks."""
