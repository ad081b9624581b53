"""Cuppa investment calculator backend."""
