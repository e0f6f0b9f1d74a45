"""Sort integers with two stacks, printing the stack instructions used."""

__version__ = "1.0.0"