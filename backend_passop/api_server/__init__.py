"""
API server package — HTTP interface to the password collection.

GET / lists records, POST / saves one, DELETE / removes one matching record.
"""
