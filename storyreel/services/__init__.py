"""
Services: Gemini infrastructure, generation pipeline and use cases.
"""
