"""claude-code-router configuration installer."""

__version__ = "1.1.0"
