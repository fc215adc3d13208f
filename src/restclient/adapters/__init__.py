"""Adaptadores de I/O (httpx) y del codec JSON."""
