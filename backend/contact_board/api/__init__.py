"""
HTTP and WebSocket API for the Contact Board service
"""
