"""Blog API: REST backend for posts, comments and users.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
