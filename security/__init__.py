"""
security/ - Access Control
==========================
Decorators that guard handlers reserved for the manager chat.
"""
