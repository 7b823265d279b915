class TerminalInitError(RuntimeError):
    """Raised when curses cannot take over the terminal."""
