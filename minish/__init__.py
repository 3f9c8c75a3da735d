"""minish - a minimal interactive shell"""

__version__ = "0.1.0"
