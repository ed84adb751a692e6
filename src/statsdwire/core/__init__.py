"""Core domain: telemetry primitives and their wire encoding."""
