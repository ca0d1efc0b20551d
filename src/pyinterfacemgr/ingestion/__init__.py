"""Ingestion helpers for raw driver status payloads."""

from pyinterfacemgr.ingestion.status import parse_driver_status

__all__ = ["parse_driver_status"]
