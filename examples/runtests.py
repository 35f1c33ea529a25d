"""Marks this directory as the test root; run ``fixtura test -p examples``."""
