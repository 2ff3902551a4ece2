"""
Social network of users joined by undirected connections.

Provides closeness centrality computed with a breadth-first search over the
connection graph.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Set

from ..util.logger import logger


class NetworkError(ValueError):
    """Base class for social network errors."""


class DuplicateUserError(NetworkError):
    """Raised when a user id is registered twice."""


class UnknownUserError(NetworkError):
    """Raised when a user id is not registered."""


@dataclass
class User:
    """A member of the network and the ids of the users it is connected to."""

    user_id: str
    name: str
    connections: Set[str] = field(default_factory=set)

    def add_connection(self, user_id: str) -> bool:
        """Add a connection; False if it already exists."""
        if user_id in self.connections:
            return False
        self.connections.add(user_id)
        return True

    def is_connected_to(self, user_id: str) -> bool:
        return user_id in self.connections


class SocialNetwork:
    def __init__(self, name: str):
        self.name = name
        self.users: Dict[str, User] = {}
        self.logger = logger.bind(component="network")

    def create_user(self, user_id: str, name: str) -> User:
        """Register a new user.

        Raises:
            DuplicateUserError: if ``user_id`` is already registered
        """
        if user_id in self.users:
            raise DuplicateUserError(f"User {user_id!r} already exists in {self.name}")
        user = User(user_id, name)
        self.users[user_id] = user
        return user

    def get_user(self, user_id: str) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise UnknownUserError(f"User {user_id!r} is not in {self.name}")
        return user

    def add_relationship(self, user_one_id: str, user_two_id: str) -> bool:
        """Connect two users in both directions.

        Returns:
            True if a new connection was made, False if the users were already
            connected or are the same user

        Raises:
            UnknownUserError: if either user is not registered
        """
        user_one = self.get_user(user_one_id)
        user_two = self.get_user(user_two_id)

        if user_one_id == user_two_id:
            return False
        if user_one.is_connected_to(user_two_id):
            return False

        user_one.add_connection(user_two_id)
        user_two.add_connection(user_one_id)
        self.logger.debug(f"Connected {user_one_id} <-> {user_two_id}")
        return True

    def distances_from(self, user_id: str) -> Dict[str, int]:
        """Shortest distance in edges from ``user_id`` to every user it can reach."""
        self.get_user(user_id)

        distances = {user_id: 0}
        queue = deque([user_id])
        while queue:
            current = queue.popleft()
            for neighbour in self.users[current].connections:
                if neighbour not in distances:
                    distances[neighbour] = distances[current] + 1
                    queue.append(neighbour)
        return distances

    def closeness(self, user_id: str) -> float:
        """Normalised closeness centrality of a user.

        C(x) = (N - 1) / sum of d(x, y) over the users y reachable from x,
        where N is the number of users in the network. Unreachable users add
        nothing to the sum. A user with no connections scores 0.0.

        Raises:
            UnknownUserError: if the user is not registered
        """
        distance_sum = sum(self.distances_from(user_id).values())
        if distance_sum == 0:
            return 0.0
        return (len(self.users) - 1) / distance_sum
