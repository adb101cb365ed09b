"""
c4engine.interfaces - User interfaces for Connect Four
"""

# Don't import anything here to avoid circular imports
__all__ = []
