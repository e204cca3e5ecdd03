"""WordTally: count the words you read and look them up."""

__version__ = "0.1.0"
