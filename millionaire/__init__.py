"""A terminal quiz game with a fifteen-level prize ladder, lifelines and a question file loader."""

__version__ = "1.0.0"