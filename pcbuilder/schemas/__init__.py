"""
Pydantic schemas for API request and response validation.

Request models are deliberately lenient (see recommendations.py); response
models for AI output are documentation, not enforcement.
"""
