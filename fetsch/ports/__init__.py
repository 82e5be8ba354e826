"""Adapters between core helpers and external SQL conventions."""
