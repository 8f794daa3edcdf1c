class TreeChangesError(Exception):
    """Base class for treechanges errors"""

    pass


class MaskError(TreeChangesError, ValueError):
    """Raised when a filename mask is not a valid regular expression"""

    def __init__(self, pattern: str, message: str):
        self.pattern = pattern
        super().__init__(f"Invalid filename mask {pattern!r}: {message}")
