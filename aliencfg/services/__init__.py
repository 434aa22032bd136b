"""Keybind services for aliencfg."""
