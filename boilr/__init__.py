# boilr/__init__.py
"""boilr: design a database schema for your app idea with an LLM."""

__version__ = "0.1.0"
