"""Tests for hand."""
