"""Endpoints HTTP do Slack."""
