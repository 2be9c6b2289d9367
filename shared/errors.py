"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class LoadError(Exception):
    """Error al obtener o interpretar el catalogo de productos."""
