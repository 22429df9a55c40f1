"""
Category identifiers reported by the upstream moderation service.

Identifiers are plain strings on the wire. The named constants below cover
the categories known today; results keep any other identifier untouched so
that categories added upstream later still reach the caller.
"""

import enum
from typing import Dict, Tuple

CATEGORY_HATE = "hate"
CATEGORY_HATE_THREATENING = "hate/threatening"
CATEGORY_HARASSMENT = "harassment"
CATEGORY_HARASSMENT_THREATENING = "harassment/threatening"
CATEGORY_SELFHARM = "self-harm"
CATEGORY_SELFHARM_INTENT = "self-harm/intent"
CATEGORY_SELFHARM_INSTRUCTIONS = "self-harm/instructions"
CATEGORY_SEXUAL = "sexual"
CATEGORY_SEXUAL_MINORS = "sexual/minors"
CATEGORY_VIOLENCE = "violence"
CATEGORY_VIOLENCE_GRAPHIC = "violence/graphic"

KNOWN_CATEGORIES: Tuple[str, ...] = (
    CATEGORY_HATE,
    CATEGORY_HATE_THREATENING,
    CATEGORY_HARASSMENT,
    CATEGORY_HARASSMENT_THREATENING,
    CATEGORY_SELFHARM,
    CATEGORY_SELFHARM_INTENT,
    CATEGORY_SELFHARM_INSTRUCTIONS,
    CATEGORY_SEXUAL,
    CATEGORY_SEXUAL_MINORS,
    CATEGORY_VIOLENCE,
    CATEGORY_VIOLENCE_GRAPHIC,
)

CATEGORY_DESCRIPTIONS: Dict[str, str] = {
    CATEGORY_HATE: (
        "Content that expresses, incites, or promotes hate based on race, gender, ethnicity, "
        "religion, nationality, sexual orientation, disability status, or caste."
    ),
    CATEGORY_HATE_THREATENING: (
        "Hateful content that also includes violence or serious harm towards the targeted group."
    ),
    CATEGORY_HARASSMENT: (
        "Content that expresses, incites, or promotes harassing language towards any target."
    ),
    CATEGORY_HARASSMENT_THREATENING: (
        "Harassment content that also includes violence or serious harm towards any target."
    ),
    CATEGORY_SELFHARM: (
        "Content that promotes, encourages, or depicts acts of self-harm, such as suicide, "
        "cutting, and eating disorders."
    ),
    CATEGORY_SELFHARM_INTENT: (
        "Content where the speaker expresses that they are engaging or intend to engage "
        "in acts of self-harm."
    ),
    CATEGORY_SELFHARM_INSTRUCTIONS: (
        "Content that encourages performing acts of self-harm, or that gives instructions "
        "or advice on how to commit such acts."
    ),
    CATEGORY_SEXUAL: (
        "Content meant to arouse sexual excitement, or that promotes sexual services "
        "(excluding sex education and wellness)."
    ),
    CATEGORY_SEXUAL_MINORS: "Sexual content that includes an individual who is under 18 years old.",
    CATEGORY_VIOLENCE: "Content that depicts death, violence, or physical injury.",
    CATEGORY_VIOLENCE_GRAPHIC: "Content that depicts death, violence, or physical injury in graphic detail.",
}


class ModerationCategory(str, enum.Enum):
    hate = CATEGORY_HATE
    hate_threatening = CATEGORY_HATE_THREATENING
    harassment = CATEGORY_HARASSMENT
    harassment_threatening = CATEGORY_HARASSMENT_THREATENING
    self_harm = CATEGORY_SELFHARM
    self_harm_intent = CATEGORY_SELFHARM_INTENT
    self_harm_instructions = CATEGORY_SELFHARM_INSTRUCTIONS
    sexual = CATEGORY_SEXUAL
    sexual_minors = CATEGORY_SEXUAL_MINORS
    violence = CATEGORY_VIOLENCE
    violence_graphic = CATEGORY_VIOLENCE_GRAPHIC
    # Escape value for identifiers added upstream after this release
    unknown = "unknown"

    @classmethod
    def parse(cls, value: str) -> "ModerationCategory":
        """Return the member for ``value``, or ``unknown`` if none matches."""
        try:
            return cls(value)
        except ValueError:
            return cls.unknown

    @property
    def description(self) -> str:
        return CATEGORY_DESCRIPTIONS.get(self.value, "")


def is_known_category(value: str) -> bool:
    return value in CATEGORY_DESCRIPTIONS
