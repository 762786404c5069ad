"""
FastAPI application for loadmaster.
"""
