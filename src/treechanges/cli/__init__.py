"""CLI tools for treechanges."""
