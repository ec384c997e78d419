"""Core application for the healthcare backend.

This package holds the in-memory record store, the account, token,
patient, doctor and mapping services, and the REST views that expose
them under ``/api/``.
"""
