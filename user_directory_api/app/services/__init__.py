"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives
its storage through the constructor, so handlers never touch the
store directly.
"""
