"""Shared constants for hgctl dot-directories and service defaults."""

HGCTL_HOME_EXT = ".hgctl"  # user-level state/config directory suffix

HGCTL_HOME_DISPLAY = f"~/{HGCTL_HOME_EXT}"  # user-readable path hint

# Built-in service defaults (the values the stock init script ships with)
DEFAULT_NAME = "helium_gateway"
DEFAULT_ENABLED = "1"
DEFAULT_PID_FILE = "/var/run/helium_gateway.pid"
DEFAULT_CONFIGURATION_FILE = "/etc/helium_gateway/settings.toml"
DEFAULT_BINARY = "/usr/bin/helium_gateway"
DEFAULT_OPTS = "--daemon -c $CONFIGURATION_FILE server"

# Directory holding per-service environment override files
ENV_OVERRIDE_DIR = "/etc/default"

# Commands accepted on the command line, in usage order
USAGE_COMMANDS = "{start|stop|restart|force-reload}"
