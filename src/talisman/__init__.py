"""talisman - ignore rules for a pre-commit secret scanner"""

__version__ = "0.1.0"
