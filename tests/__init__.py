"""Test suite for metamark."""
