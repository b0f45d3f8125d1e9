"""
Friendship graph storage and distance queries
"""

from .friendship_graph import UNREACHED, FriendshipGraph

__all__ = ["FriendshipGraph", "UNREACHED"]
