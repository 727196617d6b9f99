"""
rate-service/src/rates/db

Persistence layer for the rate service:
- session.py: engine / session factory / schema creation
- models.py: `rate` table, Rate record and the Found / NotFound lookup result
- crud.py: async CRUD + find_by_type
- seed.py: startup seed rows
"""
