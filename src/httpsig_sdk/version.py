"""Version information for the HTTP Signatures SDK"""

__version__ = "0.1.0"
