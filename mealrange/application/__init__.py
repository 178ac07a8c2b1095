"""Command and query handlers over the collaborator ports."""
