"""
Simple script to run the Housing Portal server.
"""
import uvicorn

if __name__ == "__main__":
    print("Starting Housing Portal...")
    print("Access at: http://127.0.0.1:8000")
    print("API docs at: http://127.0.0.1:8000/docs")
    print("Press Ctrl+C to stop")
    print("-" * 40)

    uvicorn.run(
        "housing_portal.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True
    )
