"""Servicios del pipeline: builder, resolver y el Client que los coordina."""
