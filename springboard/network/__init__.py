"""
Social network with closeness centrality scoring.

Independent of the springboard solvers.
"""

from .social_network import (DuplicateUserError, NetworkError, SocialNetwork,
                             UnknownUserError, User)

__all__ = [
    "SocialNetwork",
    "User",
    "NetworkError",
    "DuplicateUserError",
    "UnknownUserError",
]
