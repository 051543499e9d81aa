from enum import Enum


class NotificationType(Enum):
    """https://developers.facebook.com/docs/messenger-platform/reference/send-api#notification_type"""
    regular = "REGULAR"
    silent_push = "SILENT_PUSH"
    no_push = "NO_PUSH"
