"""Shared pieces of the CJK spacing tools: logging setup, mdBook book schemas, constants."""
