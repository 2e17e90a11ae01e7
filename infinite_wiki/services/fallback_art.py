from infinite_wiki.services.art_generator import AsciiArt

MAX_LABEL_LENGTH = 20
TRUNCATED_LENGTH = 17


def create_fallback_art(topic: str) -> AsciiArt:
    """Draw a plain box around the topic, used when art generation fails."""
    label = topic if len(topic) <= MAX_LABEL_LENGTH else topic[:TRUNCATED_LENGTH] + "..."
    padded = f" {label} "
    top = f"┌{'─' * len(padded)}┐"
    middle = f"│{padded}│"
    bottom = f"└{'─' * len(padded)}┘"
    return AsciiArt(art=f"{top}\n{middle}\n{bottom}")
