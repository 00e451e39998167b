"""Core building blocks of pysbss."""
