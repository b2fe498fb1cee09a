"""
services/ - Business Logic Layer
================================
Recording, reviewing, rendering and exporting submissions.
Services sit between the handlers and the repositories.
"""
