"""Tests for the streaming indicator implementations."""
