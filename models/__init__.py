"""
models/ - Domain Models
=======================
Dataclasses for the payloads the web handlers pass into the repositories.
"""
