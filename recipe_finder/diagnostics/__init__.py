"""
Diagnostic side channel.

Responsibilities:
- Record each API request and its outcome as an append-only JSON-lines log.
- Mirror every record to the standard logger at DEBUG level.
"""
