"""CLI commands for aliencfg."""
