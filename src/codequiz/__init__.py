"""code-quiz: guess which file a random line came from."""

__version__ = "0.1.0"
