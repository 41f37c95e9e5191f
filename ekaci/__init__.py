"""CI server, client and evaluator commands sharing a unix socket protocol and an HTTP service."""

__version__ = "0.1.0"

__all__ = ["client", "dirs", "evaluator", "server", "types", "unix_service", "web"]