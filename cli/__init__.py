"""Framefit command line interface."""
