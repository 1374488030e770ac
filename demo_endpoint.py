"""
Quick demo script to run the PC Builder backend locally.

This script starts a local server and shows how to make requests to the endpoints.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting PC Builder Backend Demo")
    print("=" * 60)
    print()
    print("API Endpoints:")
    print("   - Health Check:   GET  http://localhost:8000/health")
    print("   - PC Builds:      POST http://localhost:8000/functions/v1/generate-pc-build")
    print("   - Peripherals:    POST http://localhost:8000/functions/v1/recommend-peripherals")
    print("   - API Docs:            http://localhost:8000/docs")
    print("   - ReDoc:               http://localhost:8000/redoc")
    print()
    print("Configuration:")
    print("   AI_GATEWAY_API_KEY must be set (environment or .env)")
    print()
    print("Test with curl:")
    print('   curl -X POST "http://localhost:8000/functions/v1/generate-pc-build" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"budget": 1500, "useCase": "Gaming"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "pcbuilder.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
