"""
handlers/ - Presentation Layer
================================
Telegram command handlers for /start, /info and the admin commands.
Each handler reads the update, calls a service, and replies through utils.messaging.
Business rules (access gate, parsing, counters) live in services/.
"""
