"""Entrypoints (inbound adapters) for bloglikes.

Expose the like queries to the outside world through the command line. Parse
and validate inputs, load users through `bloglikes.adapters`, call the domain
queries, and present results.
"""
