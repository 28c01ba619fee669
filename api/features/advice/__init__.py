"""Advice feature package: relays a question to the Gemini API."""
