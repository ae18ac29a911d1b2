#############################################################################
#
#  Project Name        :    MPEG DASH manifest codec
#
#  Author              :    Alex Ashley
#
#############################################################################

class SerializationError(Exception):
    """
    Base class of all errors raised while encoding or decoding an MPD
    """


class MalformedUnion(SerializationError):
    def __init__(self, name: str, text: str) -> None:
        msg = f'Attribute "{name}" value "{text}" is neither an unsigned integer nor a boolean'
        super().__init__(msg)
        self.name = name
        self.text = text


class MalformedDocument(SerializationError):
    def __init__(self, msg: str, reason: Exception | None = None) -> None:
        if reason is not None:
            msg = f'{msg}: {reason}'
        super().__init__(msg)
        self.reason = reason
