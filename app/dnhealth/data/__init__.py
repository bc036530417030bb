"""Bundled data files for dnhealth."""
