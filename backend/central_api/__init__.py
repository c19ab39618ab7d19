"""Application package for the Central API backend.

This package exposes the controller, service, repository and model
modules used by the FastAPI application. Individual modules contain the
concrete implementations and documentation.
"""
