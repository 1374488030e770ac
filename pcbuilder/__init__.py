"""
PC Builder backend.

FastAPI service that turns a budget, use case and free-text requirements into
AI-generated PC build and peripheral recommendations.
"""

__version__ = "0.1.0"
