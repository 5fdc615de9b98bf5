"""Adapters for bloglikes.

Concrete I/O around the domain: turning plain records and JSON files into
``User`` collections.

Dependency rule: may import `bloglikes.domain`; never import `bloglikes.entrypoints`.
"""
