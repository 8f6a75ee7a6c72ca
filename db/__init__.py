"""
db/ - Database Layer
====================
Handles the PostgreSQL connection, schema reset, and fixture seeding.
This layer is the lowest in the architecture; the seed loader is the only
part that reaches up into the repositories.
"""
