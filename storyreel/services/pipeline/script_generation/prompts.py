"""
Story script prompts.

Two formats share one response schema: short-form vertical video stories
(short/medium) and long-form audiobook chapters (long/mega_long).
"""

from dataclasses import dataclass

from storyreel.models import SoundEffect, VisualEffect

from .modes import ModeProfile, StoryFormat

VISUAL_STYLE = "Photorealistic, Cinematic, 8K resolution, Pixar-style 3D render but realistic lighting"


@dataclass
class PromptTemplate:
    """
    A prompt template with placeholders.

    Usage:
        template = PromptTemplate(
            template="Tell a story about {topic}",
            description="A story prompt"
        )
        result = template.format(topic="a lost kitten")
    """
    template: str
    description: str = ""

    def format(self, **kwargs) -> str:
        return self.template.format(**kwargs)

    def __str__(self) -> str:
        return f"PromptTemplate({self.description})"


SHORT_FORM_STORY = PromptTemplate(
    description="Viral Thai short story for YouTube Shorts/TikTok",
    template="""
Create a viral short story in Thai for YouTube Shorts/TikTok about: "{topic}".

Requirements:
1. **Duration:** {duration_guidance}
2. **Structure:** The story MUST be complete with a clear beginning, middle, and a satisfying ending/conclusion within exactly {scene_count} scenes.
3. **Visual Style:** Define a "{visual_style}" style.
4. **Character Consistency:** Define a main character with consistent features (e.g., "A cute little girl with a red hoodie and big brown eyes"). **YOU MUST INCLUDE THIS EXACT DESCRIPTION IN EVERY SINGLE 'imagePrompt'**.
5. **Audio/Mood:** Analyze the story's overall sentiment. Is it Happy, Sad, Exciting, Scary, or Calm?
6. **Language:** The 'storyText' MUST be in Thai. You MUST also provide an 'englishTranslation' for subtitles.
7. **FX Analysis:**
   - 'visualEffect': Choose from [{visual_effects}]. 'camera_shake' for running/chasing scenes.
   - 'soundEffect': Choose from [{sound_effects}].
8. **SEO & Cover:**
   - Generate a standard "Title" in Thai.
   - Generate a **"Cover Title"**: A very short, punchy, CLICKBAIT phrase (2-5 words) in Thai for the thumbnail (e.g., "จุดจบสายแข็ง", "ผีบังตา", "อย่ามองกลับหลัง").
   - Generate a **"Cover Image Prompt"**: A highly detailed, dramatic image prompt for the video cover/thumbnail. High contrast, expressive, YouTube Thumbnail style collage.
   - Generate a compelling Description and 10 trending Hashtags.
9. **Scenes:**
   - Create exactly {scene_count} scenes.
   - 'storyText': Thai narration (keep it concise, ~8-10 seconds reading time per scene).
   - 'englishTranslation': Accurate English translation of the storyText.
   - 'imagePrompt': Detailed English prompt. START with: "Photorealistic, 8k, cinematic lighting...". **INCLUDE THE CHARACTER DESCRIPTION**.

Output JSON format.
""",
)

AUDIOBOOK_STORY = PromptTemplate(
    description="Immersive Thai audiobook story in chapters",
    template="""
Create a detailed, immersive "Audiobook" style story in Thai about: "{topic}".

Requirements:
1. **Format:** This is a Long Form story. {duration_guidance} Focus on deep narration, beautiful language, and immersive storytelling.
2. **Structure:** Divide the story into exactly {scene_count} Chapters (Scenes).
3. **Length:** {length_guidance}
4. **Cover:** Generate a "Cover Title" (Short clickbait in Thai) and "Cover Image Prompt" (YouTube Thumbnail style).
5. **Character:** Define a main character with consistent features. Include this exact description in every 'imagePrompt' ({visual_style}).
6. **Language:** The 'storyText' MUST be in Thai. You MUST also provide an 'englishTranslation' for subtitles.
7. **FX Analysis:** Choose 'visualEffect' from [{visual_effects}] and 'soundEffect' from [{sound_effects}].
8. **Mood:** Analyze the sentiment.
9. **SEO:** Title, Description, 10 Hashtags.

Output JSON format with properties: title, coverTitle, coverImagePrompt, seoSummary, tags, characterDescription, mood, scenes.
""",
)

_TEMPLATES = {
    StoryFormat.SHORT_FORM: SHORT_FORM_STORY,
    StoryFormat.AUDIOBOOK: AUDIOBOOK_STORY,
}


def build_story_prompt(topic: str, profile: ModeProfile) -> str:
    """Render the prompt for a topic under a mode profile."""
    template = _TEMPLATES[profile.story_format]
    return template.format(
        topic=topic,
        duration_guidance=profile.duration_guidance,
        length_guidance=profile.length_guidance,
        scene_count=profile.scene_count,
        visual_style=VISUAL_STYLE,
        visual_effects=", ".join(e.value for e in VisualEffect),
        sound_effects=", ".join(e.value for e in SoundEffect),
    ).strip()
