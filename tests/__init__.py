"""Tests for the forest_fire package."""
