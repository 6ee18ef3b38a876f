"""Core compatibility engine: platforms, references, resolver, checker."""
