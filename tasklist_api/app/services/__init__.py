"""
Service layer abstraction.

Services hold the SQL for each operation.  They receive the database
handle explicitly so request handlers never touch connections
directly.
"""
