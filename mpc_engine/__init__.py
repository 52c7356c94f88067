"""Session identifiers, round-ordered session state and store, controller configuration, bearer-token metadata and logging setup for a multi-party computation engine."""

__version__ = "1.0.0"