"""
HMAC 剪刀石头布
HMAC-verified Rock Paper Scissors for any odd number of moves
"""

__version__ = "1.0.0"
