from typing import Optional

BASE_PROMPT = (
    "Create a professional logo with prominent colors being dark blue, light blue, orange and yellow."
)

STYLE_PROMPTS = {
    "professional": "Create a professional and corporate style with clean lines and traditional business elements.",
    "modern": "Design a sleek, contemporary, and minimalist composition.",
    "friendly": "Generate a warm and welcoming design with approachable elements.",
    "bold": "Create a strong and impactful design with confident elements.",
    "surprise": "Incorporate unexpected creative elements while maintaining professionalism.",
    "eccentric": "Design a unique and artistic interpretation while keeping it business-appropriate.",
}

THEME_PROMPTS = {
    "house": "Incorporate a professional house symbol representing property ownership.",
    "handshake": "Include a handshake symbol representing trust and partnership.",
    "key": "Feature a key symbol representing the milestone of closing.",
    "shield": "Include a shield icon representing security and protection.",
    "tree": "Include a tree symbol representing growth and stability.",
    "arrow": "Incorporate a growth arrow symbolizing financial progress.",
}

# One hint per variation slot; keeps the four images visibly distinct.
VARIATION_PROMPTS = (
    "Style A: Modern and clean.",
    "Style B: Bold and dynamic.",
    "Style C: Elegant and professional.",
    "Style D: Creative and unique.",
)

VARIATION_COUNT = len(VARIATION_PROMPTS)


def get_style_prompt(style: Optional[str]) -> str:
    return STYLE_PROMPTS.get(style or "", "")


def get_theme_prompt(theme: Optional[str]) -> str:
    return THEME_PROMPTS.get(theme or "", "")


def get_description_prompt(description: Optional[str]) -> str:
    description = (description or "").strip()
    return f"Additional details: {description}." if description else ""


def get_brand_prompt(
    name: str,
    suffix: str,
    style: Optional[str],
    theme: Optional[str],
    description: Optional[str],
    variation_index: int,
) -> str:
    if not 0 <= variation_index < VARIATION_COUNT:
        raise ValueError(f"variation_index must be between 0 and {VARIATION_COUNT - 1}, got {variation_index}")

    segments = [
        BASE_PROMPT,
        f'The text "{name} {suffix}" should be prominently displayed.',
        get_style_prompt(style),
        get_theme_prompt(theme),
        get_description_prompt(description),
        VARIATION_PROMPTS[variation_index],
    ]
    return " ".join(segment for segment in segments if segment).strip()
