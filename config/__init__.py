"""Configuration for the bank account demo."""
