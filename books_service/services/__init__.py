"""
Services Package

Business logic kept apart from HTTP handling (routers):
- dates.py: normalization of upstream publication dates
- store.py: BookStore, the data access layer over the `books` table
- catalog.py: Google Books client and projection of its records
- importer.py: the import reconciliation loop
"""
