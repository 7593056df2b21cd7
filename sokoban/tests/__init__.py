"""Sokoban tests."""
