"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes only validate, delegate to one repository call, and shape the response
    - Method allow-lists are the set of decorators on each path; the router answers 405 otherwise
"""
