"""Information types generated from a YAML definition."""

from enum import Enum


class Information(Enum):
    """A closed set of classification types."""

    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    CREDENTIAL = "credential"
    DATE = "date"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, text):
        """Return the member spelled *text*, or raise ValueError."""
        for member in cls:
            if member.value == text:
                return member
        raise ValueError("Unknown type")


ALL_INFORMATION = ("email", "phone_number", "credential", "date")