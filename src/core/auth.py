"""Registered users known to the service."""

from dataclasses import dataclass, field


@dataclass
class User:
    """A registered customer."""
    username: str
    password: str


@dataclass
class UserRegistry:
    """Simple in-memory registry of users."""

    users: list[User] = field(default_factory=list)

    def is_valid(self, username: str) -> bool:
        """Check whether ``username`` is non-empty and not yet taken."""
        if not username or not username.strip():
            return False
        return all(u.username != username for u in self.users)

    def register(self, username: str, password: str) -> User:
        """Add a user. Raises ValueError if the username cannot be used."""
        if not self.is_valid(username):
            raise ValueError(f"Username '{username}' is not available")
        if not password:
            raise ValueError("Password is required")
        user = User(username=username, password=password)
        self.users.append(user)
        return user

    def authenticated(self, username: str, password: str) -> bool:
        """Check a username and password pair."""
        return any(u.username == username and u.password == password for u in self.users)
