"""Health & Wealth of Nations: animated, scrubbable bubble chart."""

__version__ = "0.1.0"
