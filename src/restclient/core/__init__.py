"""Core del cliente: dominio, contratos y pipeline request/response.

Por qué:
- El dominio (`core.domain`) y los contratos (`core.interfaces`) no conocen
  httpx ni la CLI.
- Los servicios usan adaptadores concretos: el codec JSON y, si el caller no
  inyecta otro `Transport`, el transporte httpx por defecto.
"""
