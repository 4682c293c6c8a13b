"""
models/ - Domain Models
=======================
Plain dataclasses for rooms and roommates, independent of the database layer.
"""
