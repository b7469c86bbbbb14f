"""Error reporter adapters for surfacing denial messages.

Implementations support multiple output channels:
- Text stream such as stderr (terminal)
- Python logging (whatever handlers the application configures)
"""
