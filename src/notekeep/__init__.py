"""
NoteKeep Backend - Personal Notes API

Users register, log in with a session token, and keep private notes that
only their owner can read, change or delete.

Version: 1.0.0
"""

__version__ = "1.0.0"
