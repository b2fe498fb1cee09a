"""
models/ - Domain Layer
======================
Plain dataclasses describing submissions, the stored document and the
cards rendered for review. No I/O happens here.
"""
