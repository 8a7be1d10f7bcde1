"""Shared types for the minislot service."""
