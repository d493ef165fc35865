"""Top-level package for the rumor agent.

This package contains the request handler, the command-line entrypoint and
all supporting modules for fetching, extracting, matching and ranking NBA
rumor items for a player or team.
"""

__all__ = []
