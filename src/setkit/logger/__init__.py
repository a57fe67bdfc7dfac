"""Logging setup for setkit."""
