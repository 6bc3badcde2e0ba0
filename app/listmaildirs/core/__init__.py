"""Core helpers shared across list-maildirs."""
