"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates persistence for a specific domain entity.
Repositories read raw stored data and return domain model objects.
"""
