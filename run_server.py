"""
Entry point for running the API with uvicorn.

The application is created through the ``bookstore.application`` factory.
"""

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore:application", factory=True, host="0.0.0.0", port=8000
    )
