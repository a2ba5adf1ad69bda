"""hubgallery — FastAPI REST API layer.

This package contains the FastAPI application, Pydantic response models,
the error types, and the cursor pagination logic.

Modules
-------
main
    Application factory, route handlers and the ``main()`` CLI entry point.
models
    Pydantic models for API responses.
errors
    Error hierarchy and its JSON exception handler.
pagination
    Next-cursor extraction and page normalisation helpers.
"""
