"""Shared test data constants."""

PROFILE = {"name": "Jane Doe", "age": 42, "tags": ["admin", "staff"]}
SETTINGS = {"theme": "dark", "notifications": {"email": True, "sms": False}}
