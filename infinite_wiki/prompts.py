DEFINITION_PROMPT = (
    'Provide a concise, single-paragraph encyclopedia-style definition for the term: "{topic}". '
    "Be informative and neutral. Do not use markdown, titles, or any special formatting. "
    "Respond with only the text of the definition itself."
)

RANDOM_WORD_PROMPT = (
    "Generate a single, random, interesting English word or a two-word concept. "
    "It can be a noun, verb, adjective, or a proper noun. "
    "Respond with only the word or concept itself, with no extra text, punctuation, or formatting."
)

ART_PALETTE = "│─┌┐└┘├┤┬┴┼►◄▲▼○●◐◑░▒▓█▀▄■□▪▫★☆♦♠♣♥⟨⟩/\\_|"

ASCII_ART_PROMPT = """For "{topic}", create a JSON object with one key: "art".
1. "art": meta ASCII visualization of the word "{topic}":
  - Palette: {palette}
  - Shape mirrors concept - make the visual form embody the word's essence
  - Examples:
    * "explosion" → radiating lines from center
    * "hierarchy" → pyramid structure
    * "flow" → curved directional lines
  - Return as a single string with \\n for line breaks

Return ONLY the raw JSON object, no additional text. The response must start with "{{" and end with "}}" and contain only the "art" property."""
