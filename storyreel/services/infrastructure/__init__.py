"""Infrastructure services: Gemini access and response parsing."""
