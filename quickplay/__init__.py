"""QuickPlay mini-game engines."""

from quickplay.shell import QuickPlayShell, bootstrap_shell, create_shell

__all__ = ["QuickPlayShell", "bootstrap_shell", "create_shell"]
