"""
Persistent record store

- record_store.py: ID-keyed tables with bounded record sizes and the
  transaction scope every booking operation runs in
- id_allocator.py: the counter shared by all tables
"""
