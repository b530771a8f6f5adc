"""Backend utility tooling for the event-management platform."""

__version__ = "0.1.0"
