"""
Core cross-cutting pieces shared by the API server and the storage layer.
"""
