"""Configuration for aliencfg."""
