"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific LightBnB table.
Repositories return raw rows (dicts keyed by column name) to the web handlers.
Database errors are logged here and surface to callers as a None result.
"""
