"""Per-run registry of message ids shared by @Message and @LogMessage."""

from logbundle_dsl.api.errors import CollisionError


class MessageRegistry:
    """
    Maps message id -> template for one generation run.

    Any second registration of an id fails, even with identical template text.
    One registry per interface; never share an instance across interfaces.
    """

    def __init__(self):
        self._messages = {}

    def register(self, message_id: int, template: str) -> None:
        if message_id in self._messages:
            raise CollisionError(message_id, template, self._messages[message_id])
        self._messages[message_id] = template

    def get(self, message_id: int):
        return self._messages.get(message_id)

    def __contains__(self, message_id):
        return message_id in self._messages

    def __len__(self):
        return len(self._messages)

    def items(self):
        return self._messages.items()
