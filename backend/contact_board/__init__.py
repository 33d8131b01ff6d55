"""
Contact Board: contact messages stored in a relational database and
pushed live to every connected WebSocket subscriber.
"""

__version__ = "1.0.0"
