"""
FastAPI routers for all API endpoints.

- recommendations: the two AI recommendation endpoints
- health: public liveness check
"""
