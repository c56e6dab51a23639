"""Unit tests for uri_builder."""
