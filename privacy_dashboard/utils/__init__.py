"""Shared helpers: logging, errors, URLs, company names."""
