"""Sort integers with two stacks and a restricted instruction set, with small text, byte and list helpers."""

__version__ = "1.0.0"