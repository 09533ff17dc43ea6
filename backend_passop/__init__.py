"""
Backend PassOP — password manager storage API.

Serves a single collection of password records to the PassOP frontend:
list, create and delete over HTTP, backed by MongoDB (or a SQL fallback).
No authentication, no encryption, no validation of record fields.
"""

__version__ = "0.1.0"
