"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los descriptores puros y estrictos (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni SDKs: solo conceptos del problema.
"""
