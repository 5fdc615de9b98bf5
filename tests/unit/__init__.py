"""Unit tests.

Each test exercises one function or class against in-memory users; nothing
here reads files or the environment without monkeypatching it first.
"""
