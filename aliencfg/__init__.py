"""
aliencfg - key-binding manager for flat key:value mod configuration files
"""

__version__ = "0.3.0"
