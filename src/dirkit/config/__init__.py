"""Configuration loading and derived settings for dirkit."""
