"""Welcome bot - greets new Pachca members from outgoing webhooks."""
__version__ = "0.1.0"
