"""
faucetbot - Matrix chat bot for a token faucet.

Relays `!balance`, `!drip` and `!help` commands from Matrix rooms to the
faucet backend's HTTP API and posts the backend's answer back to the room.
"""

__version__ = "0.1.0"
