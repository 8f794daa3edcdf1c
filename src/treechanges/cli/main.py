"""Main CLI entry point for treechanges."""  # pragma: no cover

from treechanges.cli.app import app  # pragma: no cover
from treechanges.config import TreeChangesConfig  # pragma: no cover
from treechanges.utils import setup_logging  # pragma: no cover

# Register commands
from treechanges.cli.commands import watch  # pragma: no cover

__all__ = ["watch"]  # pragma: no cover


# Set up logging when module is imported
_config = TreeChangesConfig()  # pragma: no cover
setup_logging(level=_config.log_level, log_file=_config.log_file)  # pragma: no cover

if __name__ == "__main__":  # pragma: no cover
    app()
