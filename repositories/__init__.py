"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all reads and writes for one part of the JSON state.
Repositories receive raw JSON data from a store and return domain model objects.
"""
