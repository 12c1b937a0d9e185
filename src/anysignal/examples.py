"""Example usage of the anysignal package.

This module demonstrates priorities, halting, memorized params and
compound signals.
"""

from __future__ import annotations

from dataclasses import dataclass

from anysignal import CompoundSignal, Signal, SignalDescriptor


@dataclass
class User:
    """User domain object."""

    id: int
    name: str


@dataclass
class FileEvent:
    """File operation event."""

    path: str
    operation: str
    size: int = 0


class Counter:
    """Simple counter with signals for state changes."""

    incremented = SignalDescriptor()
    reset = SignalDescriptor()

    def __init__(self, initial: int = 0) -> None:
        self._value = initial

    def increment(self) -> None:
        """Increment the counter and dispatch the incremented signal."""
        self._value += 1
        self.incremented.dispatch(self._value)

    def reset_counter(self) -> None:
        """Reset the counter to zero."""
        self._value = 0
        self.reset.dispatch()

    @property
    def value(self) -> int:
        """Return the current value of the counter."""
        return self._value


class UserService:
    """Service handling user operations."""

    user_created = SignalDescriptor()
    user_deleted = SignalDescriptor()

    def create_user(self, name: str) -> User:
        """Create a new user and dispatch creation event."""
        user = User(id=123, name=name)
        self.user_created.dispatch(user)
        return user

    def delete_user(self, user: User) -> None:
        self.user_deleted.dispatch(user)


class AuditLogger:
    """Audit logger listening to user events with high priority."""

    def __init__(self, user_service: UserService) -> None:
        user_service.user_created.add(self.on_user_created, priority=10)
        user_service.user_deleted.add(self.on_user_deleted, priority=10)

    def on_user_created(self, user: User) -> None:
        print(f"AUDIT: User created - ID: {user.id}, Name: {user.name}")

    def on_user_deleted(self, user: User) -> bool:
        print(f"AUDIT: User deleted - ID: {user.id}, Name: {user.name}")
        # deleted users don't get notifications
        return False


class NotificationService:
    """Sends notifications based on user events."""

    def __init__(self, user_service: UserService) -> None:
        user_service.user_created.add(self.on_user_created)
        user_service.user_deleted.add(self.on_user_deleted)

    def on_user_created(self, user: User) -> None:
        print(f"NOTIFICATION: Welcome {user.name}!")

    def on_user_deleted(self, user: User) -> None:
        print(f"NOTIFICATION: Goodbye {user.name}!")


def demonstrate_basic_signals() -> None:
    """Demonstrate basic signal usage."""
    print("=== Basic Signals Demo ===")

    counter = Counter()

    def on_increment(value: int) -> None:
        print(f"Counter incremented to: {value}")

    def on_first_increment(value: int) -> None:
        print(f"First increment: {value}")

    counter.incremented.add(on_increment)
    counter.incremented.add_once(on_first_increment, priority=1)
    counter.reset.add(lambda: print("Counter was reset"))

    counter.increment()
    counter.increment()
    counter.reset_counter()


def demonstrate_priorities() -> None:
    """Demonstrate priorities and propagation control."""
    print("\n=== Priorities Demo ===")

    user_service = UserService()
    NotificationService(user_service)
    AuditLogger(user_service)  # added last, runs first

    user = user_service.create_user("Alice")
    user_service.delete_user(user)


def demonstrate_memorize() -> None:
    """Demonstrate late listeners receiving memorized params."""
    print("\n=== Memorize Demo ===")

    config_loaded = Signal[str](memorize=True)
    config_loaded.dispatch("settings.toml")
    config_loaded.add(lambda path: print(f"Late listener got: {path}"))


def demonstrate_compound_signal() -> None:
    """Demonstrate a compound signal resolving after all of its signals."""
    print("\n=== Compound Signal Demo ===")

    file_saved = Signal[FileEvent]()
    user_created = Signal[User]()
    all_done = CompoundSignal(file_saved, user_created)

    def on_all_done(file_args: tuple[FileEvent], user_args: tuple[User]) -> None:
        print(f"All done: {file_args[0].path} by {user_args[0].name}")

    all_done.add(on_all_done)
    file_saved.dispatch(FileEvent("/tmp/test.txt", "create", 13))
    print(f"Resolved after first signal: {all_done.is_resolved()}")
    user_created.dispatch(User(1, "Bob"))
    print(f"Resolved after second signal: {all_done.is_resolved()}")

    all_done.add(lambda *_: print("Late listener called with resolved params"))


def main() -> None:
    """Run all demonstrations."""
    demonstrate_basic_signals()
    demonstrate_priorities()
    demonstrate_memorize()
    demonstrate_compound_signal()


if __name__ == "__main__":
    main()
