"""Test suite for the Scheduling Admin API."""
