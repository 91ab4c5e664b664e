"""Enums for severity, event availability and rule topics."""
from enum import Enum


class Severity(str, Enum):
    NA = "NA"
    OK = "OK"
    INFO = "INFO"
    WARNING = "WARNING"

    @property
    def limit(self):
        """Lowest score classified as this severity."""
        return SEVERITY_LIMITS[self]

    @classmethod
    def from_score(cls, score):
        if score >= SEVERITY_LIMITS[cls.WARNING]:
            return cls.WARNING
        if score >= SEVERITY_LIMITS[cls.INFO]:
            return cls.INFO
        if score >= SEVERITY_LIMITS[cls.OK]:
            return cls.OK
        return cls.NA


SEVERITY_LIMITS = {
    Severity.NA: -1.0,
    Severity.OK: 0.0,
    Severity.INFO: 25.0,
    Severity.WARNING: 75.0,
}


class EventAvailability(str, Enum):
    AVAILABLE = "AVAILABLE"
    UNAVAILABLE = "UNAVAILABLE"
    DISABLED = "DISABLED"
    UNKNOWN = "UNKNOWN"


class Topic(str, Enum):
    FILE_IO = "file_io"


class EventType(str, Enum):
    FILE_WRITE = "jdk.FileWrite"
    FILE_READ = "jdk.FileRead"
