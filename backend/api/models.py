from django.db import models

USERNAME_MAX_LENGTH = 32


def isoformat_z(value):
    return value.isoformat().replace("+00:00", "Z")


class ChatUser(models.Model):
    username = models.CharField(max_length=USERNAME_MAX_LENGTH, unique=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"User {self.username}"

    def to_dict(self):
        return {"id": self.id, "username": self.username}


class Message(models.Model):
    sender = models.CharField(max_length=USERNAME_MAX_LENGTH)
    text = models.TextField()
    timestamp = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"Message {self.id} from {self.sender} at {self.timestamp}"

    def to_dict(self):
        return {
            "id": self.id,
            "sender": self.sender,
            "text": self.text,
            "timestamp": isoformat_z(self.timestamp),
        }
