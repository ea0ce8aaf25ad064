import uvicorn

if __name__ == "__main__":
    # Dataset path comes from LIFETIMES_DATA_PATH (default: data/people.json)
    print("Starting Lifetimes Timeline API...")
    print("Docs available at: http://localhost:8000/docs")

    uvicorn.run(
        "lifetimes.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
