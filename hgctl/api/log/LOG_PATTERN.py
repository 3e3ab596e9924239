import re

# One unified log line: [timestamp] [domain] LEVEL: message
LOG_PATTERN = re.compile(
    r"^\[(?P<timestamp>[^\]]+)\] \[(?P<domain>\w+)\] (?P<level>DEBUG|INFO|WARN|ERROR): (?P<message>.*)$"
)
