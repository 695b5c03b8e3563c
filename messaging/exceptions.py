# messaging/exceptions.py


class ChatError(Exception):
    message = "Chat operation failed."

    def __init__(self, message=None):
        super().__init__(message or self.message)


class EmptyMessage(ChatError):
    message = "Message cannot be empty."


class NotParticipant(ChatError):
    message = "You are not a participant in this chat."


class SelfChatNotAllowed(ChatError):
    message = "You can't start a chat with yourself."
