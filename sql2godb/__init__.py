"""
sql2godb: generate a pgx data-access layer in Go from SQL CREATE TABLE statements.
"""

__version__ = "0.1.3"
