"""Analysis reporters for outputting metrics and smells."""

from .console import ConsoleReporter

__all__ = ["ConsoleReporter"]
