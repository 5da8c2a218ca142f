"""lombok-wiring — deferred Lombok build wiring for source sets."""

__version__ = "0.1.0"
