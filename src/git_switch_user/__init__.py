"""git-switch-user: switch between git identities."""

__version__ = "0.3.0"
