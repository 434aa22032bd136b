"""Utility modules for aliencfg."""
