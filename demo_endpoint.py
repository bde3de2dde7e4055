"""
Quick demo script to run the catalog API locally.

Requires SUPABASE_URL and SUPABASE_PUBLISHABLE_KEY in the environment or in
a .env file; the server refuses to start without them.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Catalog Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8000/health")
    print("   - Categories:    GET  http://localhost:8000/categories?max_age=5")
    print("   - Settings:      GET  http://localhost:8000/settings")
    print("   - API Docs:           http://localhost:8000/docs")
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "catalog_backend.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
