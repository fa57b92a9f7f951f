from __future__ import annotations

from typing import Dict, List, Optional

from ..llm.client_base import ContentPart, TextPart
from ..llm_input.payload_codec import image_part

HEALTH_SYSTEM_INSTRUCTION = """
You are PetGuard AI, a compassionate and knowledgeable veterinary assistant AI.
Your goal is to help pet owners understand their pet's health based on provided details and images.

Guidance:
1. Analyze the provided image (if any) specifically looking for signs of inflammation, infection, injury, or parasites related to the specified body part.
2. Correlate visual findings with the described symptoms.
3. Provide a structured response:
   - **Observation**: What you see in the image and understand from the text.
   - **Potential Causes**: List 2-3 possible reasons (e.g., allergies, infection, trauma).
   - **Recommendation**: Immediate home care steps (if safe) and when to see a vet (e.g., "Monitor for 24h" vs "Emergency").
4. **Tone**: Calm, professional, but empathetic.
5. **Disclaimer**: ALWAYS end with: "Disclaimer: I am an AI, not a veterinarian. This analysis is for informational purposes only and does not replace professional veterinary advice."
"""

DEFAULT_STYLE = "Cute"
STYLE_PROMPTS: Dict[str, str] = {
    "Cute": "adorable disney pixar style 3d character, soft lighting, cute big eyes",
    "Cool": "cyberpunk character, cool neon lighting, sunglasses, bold vector art",
    "Pixel": "pixel art character, 8-bit retro game style, blocky, vibrant colors",
}

# Tone guidance listed in the card metadata prompt.
CARD_THEMES: Dict[str, str] = {
    "Daily": "Slice of life, cozy.",
    "Profile": "Heroic, best angle.",
    "Fun": "Silly, costumes, playing.",
    "Sticker": "Pop art, bold outlines.",
}

DEFAULT_ART_THEME = "Profile"
ART_PROMPTS: Dict[str, str] = {
    "Daily": (
        "Turn this image into a cute illustration of the {species} in a cozy, daily life setting "
        "(e.g. sleeping on a cloud, eating). Soft pastel colors, heartwarming style."
    ),
    "Fun": (
        "Turn this image into a funny cartoon of the {species} doing something silly "
        "(e.g. wearing a hat, playing). Vibrant colors, joyful expression."
    ),
    "Sticker": (
        "Turn this image into a pop-art sticker design of the {species}. "
        "Bold thick white outline, bright flat colors, simple background."
    ),
    "Profile": (
        "Turn this image into an epic, heroic portrait of the {species}. "
        "Cinematic lighting, detailed digital art, majestic pose."
    ),
}


def style_fragment(style: Optional[str]) -> str:
    return STYLE_PROMPTS.get(style or DEFAULT_STYLE, STYLE_PROMPTS[DEFAULT_STYLE])


def art_prompt(theme: Optional[str], species: str) -> str:
    template = ART_PROMPTS.get(theme or DEFAULT_ART_THEME, ART_PROMPTS[DEFAULT_ART_THEME])
    return template.format(species=species)


def build_health_parts(
    *,
    symptoms: str,
    body_part: str,
    current_image: Optional[str] = None,
    baseline_image: Optional[str] = None,
) -> List[ContentPart]:
    """
    Images first (baseline, then current), followed by the text prompt.
    """
    parts: List[ContentPart] = []
    prompt = f"Analyze the health of a pet's {body_part}.\n\nSymptoms described: {symptoms}"

    if baseline_image:
        prompt += (
            "\n\nI have provided two images. The first image is the BASELINE (healthy) image "
            "from their profile. The second image is the CURRENT condition. "
            "Please compare them if possible to identify changes."
        )
        parts.append(image_part(baseline_image))

    if current_image:
        parts.append(image_part(current_image))
    else:
        prompt += "\n\n(No current image provided, please analyze based on text description only.)"

    parts.append(TextPart(prompt))
    return parts


def build_personality_parts(image: str) -> List[ContentPart]:
    lines: List[str] = []
    lines.append("Analyze this pet's appearance and generate a fun, whimsical personality profile.")
    lines.append("")
    lines.append("Return a JSON object with:")
    lines.append(
        "- tags: array of 3 short, fun personality adjectives (e.g. 'Sassy', 'Cuddly', 'Speedster')"
    )
    lines.append("- description: a short, 1-sentence whimsical description of this pet's vibe")
    lines.append("")
    lines.append("Return ONLY valid JSON, no markdown.")
    return [image_part(image), TextPart("\n".join(lines))]


def build_cartoon_parts(image: str, style: Optional[str]) -> List[ContentPart]:
    prompt = (
        f"Turn this image into a {style_fragment(style)}. "
        "Maintain the fur color and breed characteristics. High quality, solid background."
    )
    return [image_part(image), TextPart(prompt)]


def build_card_metadata_parts(*, species: str, theme: Optional[str]) -> List[ContentPart]:
    lines: List[str] = []
    lines.append(
        f'Generate a creative collectible card metadata for a {species} in a "{theme}" theme.'
    )
    lines.append("Themes:")
    for name, tone in CARD_THEMES.items():
        lines.append(f"- {name}: {tone}")
    lines.append("")
    lines.append("Return a JSON object with:")
    lines.append("- name: Creative card title")
    lines.append("- description: Fun flavor text")
    lines.append("- rarity: One of 'Common', 'Rare', 'Epic', 'Legendary'")
    lines.append("- tags: Array of 2-3 short tags")
    lines.append("")
    lines.append("Return ONLY valid JSON, no markdown.")
    return [TextPart("\n".join(lines))]


def build_card_art_parts(*, image: str, theme: Optional[str], species: str) -> List[ContentPart]:
    return [image_part(image), TextPart(art_prompt(theme, species))]
