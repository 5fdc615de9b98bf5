"""Domain layer for bloglikes.

Contains the user/blog data model, the like-counting queries and the domain
errors they raise. This package is deliberately technology-agnostic.

Dependency rule: do not import from `bloglikes.adapters` or `bloglikes.entrypoints`.
"""
