"""Infrastructure Layer: database wiring, repositories and logging.

Invariants:
    - Infrastructure may import from core/ and models/, never from api/
    - Every store failure leaves this layer as DatabaseError
"""
