"""
Response schema sent with every story script request.

Enum lists come from the model enums so the schema and the parse-time
validation can never disagree.
"""

from google.genai import types

from storyreel.models import SoundEffect, VisualEffect

SCENE_REQUIRED_FIELDS = ["sceneNumber", "storyText", "englishTranslation", "imagePrompt"]
STORY_REQUIRED_FIELDS = ["title", "seoSummary", "tags", "characterDescription", "mood", "scenes"]


def _string(description: str = "") -> types.Schema:
    if description:
        return types.Schema(type=types.Type.STRING, description=description)
    return types.Schema(type=types.Type.STRING)


def build_scene_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "sceneNumber": types.Schema(type=types.Type.INTEGER),
            "storyText": _string("Thai narration"),
            "englishTranslation": _string("English subtitle translation"),
            "imagePrompt": _string("English image prompt including the character description"),
            "visualEffect": types.Schema(
                type=types.Type.STRING,
                enum=[effect.value for effect in VisualEffect],
            ),
            "soundEffect": types.Schema(
                type=types.Type.STRING,
                enum=[effect.value for effect in SoundEffect],
            ),
        },
        required=SCENE_REQUIRED_FIELDS,
    )


def build_story_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "title": _string("Title in Thai"),
            "coverTitle": _string("Short catchy cover text (3-5 words) in Thai"),
            "coverImagePrompt": _string("Cinematic cover image prompt"),
            "seoSummary": _string("Description"),
            "tags": types.Schema(type=types.Type.ARRAY, items=_string()),
            "characterDescription": _string(),
            "mood": _string(),
            "scenes": types.Schema(type=types.Type.ARRAY, items=build_scene_schema()),
        },
        required=STORY_REQUIRED_FIELDS,
    )
