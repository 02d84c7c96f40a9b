"""Core Layer: pure domain pieces: error taxonomy, boundary protocols, timestamps.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/
    - No IO
"""
