"""Message templates for rule results, filled with str.format."""

FILE_WRITE_RULE_NAME = "File Write Peak Duration"

FILE_WRITE_CONFIG_WARNING_LIMIT = "Write duration warning limit"
FILE_WRITE_CONFIG_WARNING_LIMIT_LONG = (
    "The shortest file write duration that should trigger a warning. "
    "Half of this value triggers an informational result."
)

FILE_WRITE_NO_EVENTS = "No file write events were recorded."
FILE_WRITE_OK = "No long file write events were found. The longest write took {peak}."
FILE_WRITE_WARN = "There are long file write pauses in this recording. The longest write took {peak}."
FILE_WRITE_WARN_LONG = (
    "The longest recorded file write took {peak} to write {amount} to '{path}'. "
    "The average time for a file write was {average}. "
    "The total time spent writing files was {total}, of which {path_total} was spent writing to '{path}'. "
    "Long file writes may stall the threads doing them; consider buffering writes "
    "or moving them off latency sensitive threads."
)

UNKNOWN_FILE_NAME = "unknown file"

AVAILABILITY_UNAVAILABLE = "The {types} events are not available in this recording."
AVAILABILITY_UNAVAILABLE_LONG = (
    "This rule needs {types} events. The recording does not contain that event type, "
    "either because the runtime does not support it or the recording was made without it."
)
AVAILABILITY_DISABLED = "The {types} events are disabled in this recording."
AVAILABILITY_DISABLED_LONG = (
    "This rule needs {types} events. Enable them in the recording settings and record again."
)
AVAILABILITY_UNKNOWN = "Could not tell whether {types} events were recorded."
AVAILABILITY_UNKNOWN_LONG = (
    "The recording declares {types} events but carries no recording settings for them. "
    "Make a new recording with {types} events enabled to evaluate this rule."
)

AVAILABILITY_TEXTS = {
    "UNAVAILABLE": (AVAILABILITY_UNAVAILABLE, AVAILABILITY_UNAVAILABLE_LONG),
    "DISABLED": (AVAILABILITY_DISABLED, AVAILABILITY_DISABLED_LONG),
    "UNKNOWN": (AVAILABILITY_UNKNOWN, AVAILABILITY_UNKNOWN_LONG),
}
