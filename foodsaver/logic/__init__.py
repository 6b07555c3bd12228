"""Core business logic layer.

Subpackages:
- storage: food storage analysis helpers (expiring soon, low stock, value report)
"""
__all__ = ["storage"]
