"""Test suite for quantstream.

Tests mirror the package layout: ``core`` for errors and logging, ``utils`` for
the bounded window and ``indicators`` for the execution contract and every
indicator.
"""
