"""Rate-limited Todoist REST client for AI assistant tool hosts."""

__version__ = "0.1.0"
