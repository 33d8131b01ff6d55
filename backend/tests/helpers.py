"""
Test doubles and request helpers shared by the contact board tests.
"""
from contact_board.repositories.message_repository import StoreError


class RecordingNotifier:
    """Stands in for the WebSocket channel and remembers every broadcast."""

    def __init__(self):
        self.events = []

    async def broadcast(self, event, data):
        self.events.append((event, data))


class UnreachableStore:
    """A store whose database is down."""

    error_text = "could not connect to server: Connection refused"

    async def upsert_user(self, email, name):
        raise StoreError(self.error_text)

    async def create_message(self, subject, content, user_email):
        raise StoreError(self.error_text)

    async def list_messages(self, limit=None):
        raise StoreError(self.error_text)

    async def ping(self):
        raise StoreError(self.error_text)


def submit(client, name, subject, email, message):
    return client.post(
        "/api/contact",
        json={"name": name, "subject": subject, "email": email, "message": message},
    )
